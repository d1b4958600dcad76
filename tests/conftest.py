"""
Module: conftest.py

Date: 2026-02-10

Global pytest configuration and fixtures for the gridcore test suite.
Includes CI-friendly handling of the optional PyQt5 adapter tests.
"""

import os

import pytest

# Allow Qt tests to run on headless machines (no display server).
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from gridcore.models.column import ColumnDefinition


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring a Qt application")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI tests on CI."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ
    if not is_ci:
        return

    skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
    for item in items:
        if "gui" in item.keywords:
            item.add_marker(skip_gui)


class RecordingDiagnostics:
    """Diagnostics sink that keeps every report for assertions."""

    def __init__(self):
        self.reports = []

    def report(self, source, message, error=None):
        self.reports.append((source, message, error))

    def sources(self):
        return [source for source, _, _ in self.reports]


@pytest.fixture
def diagnostics():
    """Fixture providing a recording diagnostics sink."""
    return RecordingDiagnostics()


@pytest.fixture
def age_rows():
    """Three people with distinct ages."""
    return [
        {"id": 1, "name": "Alice", "age": 30},
        {"id": 2, "name": "bob", "age": 25},
        {"id": 3, "name": "Carol", "age": 35},
    ]


@pytest.fixture
def twelve_rows():
    """Twelve rows with ids 0..11."""
    return [{"id": i, "value": i * 10} for i in range(12)]


@pytest.fixture
def people_columns():
    """Columns for the ``age_rows`` fixture."""
    return [
        ColumnDefinition("id", sorter="number"),
        ColumnDefinition("name", title="Name", sorter="string"),
        ColumnDefinition("age", title="Age", sorter="number"),
    ]
