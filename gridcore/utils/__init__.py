"""Utility packages: events and logging."""
