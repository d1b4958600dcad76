"""
Tests for the query pipeline: filter, sort and window stages.

Date: 2026-02-10
"""

from dataclasses import replace

from gridcore.core.pipeline import (
    QueryState,
    filter_rows,
    page_button_window,
    recompute,
    resolve_sorters,
    sort_rows,
    total_pages,
)
from gridcore.models.column import ColumnDefinition
from gridcore.models.query import FilterEntry, SortDirection, SorterEntry


def ids(rows):
    return [row["id"] for row in rows]


class TestFilterStage:
    """Test filter_rows."""

    def test_greater_than_keeps_source_order(self, age_rows):
        """Test that a comparison filter keeps matches in source order."""
        rows = filter_rows(age_rows, [FilterEntry.create("age", ">", 28)])
        assert ids(rows) == [1, 3]

    def test_all_filters_must_match(self, age_rows):
        """Test that entries are combined with AND."""
        entries = [FilterEntry.create("age", ">", 20), FilterEntry.create("name", "like", "o")]
        assert ids(filter_rows(age_rows, entries)) == [2, 3]

    def test_contains_is_case_insensitive(self, age_rows):
        """Test the contains operator ignores case."""
        assert ids(filter_rows(age_rows, [FilterEntry.create("name", "like", "AL")])) == [1]

    def test_equals_is_strict(self):
        """Test that equality does not coerce strings to numbers."""
        rows = [{"id": 1, "v": 5}, {"id": 2, "v": "5"}]
        assert ids(filter_rows(rows, [FilterEntry.create("v", "=", 5)])) == [1]
        assert ids(filter_rows(rows, [FilterEntry.create("v", "!=", 5)])) == [2]

    def test_non_numeric_rows_fail_comparisons(self):
        """Test that rows without a numeric value drop out of comparisons."""
        rows = [{"id": 1, "v": "abc"}, {"id": 2, "v": 10}, {"id": 3}]
        assert ids(filter_rows(rows, [FilterEntry.create("v", ">=", 0)])) == [2]

    def test_unknown_operator_accepts_everything(self, age_rows):
        """Test that an unknown operator leaves the rows untouched."""
        entry = FilterEntry.create("age", "between", 1)
        assert not entry.is_valid
        assert ids(filter_rows(age_rows, [entry])) == [1, 2, 3]

    def test_operator_aliases(self, age_rows):
        """Test that word aliases resolve to operators."""
        assert ids(filter_rows(age_rows, [FilterEntry.create("age", "lte", 30)])) == [1, 2]


class TestSortStage:
    """Test sort_rows and sorter resolution."""

    def test_number_sort_ascending(self, age_rows, people_columns):
        """Test ascending numeric sort."""
        resolved = resolve_sorters(people_columns)
        rows = sort_rows(age_rows, [SorterEntry("age")], resolved)
        assert ids(rows) == [2, 1, 3]

    def test_descending_reverses(self, age_rows, people_columns):
        """Test descending numeric sort."""
        resolved = resolve_sorters(people_columns)
        rows = sort_rows(age_rows, [SorterEntry("age", SortDirection.DESC)], resolved)
        assert ids(rows) == [3, 1, 2]

    def test_string_sort_ignores_case(self, age_rows, people_columns):
        """Test that the string sorter compares case-insensitively."""
        resolved = resolve_sorters(people_columns)
        rows = sort_rows(age_rows, [SorterEntry("name")], resolved)
        assert ids(rows) == [1, 2, 3]

    def test_stable_multi_key(self):
        """Test that the secondary key breaks ties and full ties keep source order."""
        rows = [
            {"id": 1, "team": "b", "score": 2},
            {"id": 2, "team": "a", "score": 2},
            {"id": 3, "team": "a", "score": 1},
            {"id": 4, "team": "a", "score": 2},
        ]
        columns = [ColumnDefinition("team", sorter="string"), ColumnDefinition("score", sorter="number")]
        resolved = resolve_sorters(columns)
        ordered = sort_rows(rows, [SorterEntry("team"), SorterEntry("score", SortDirection.DESC)], resolved)
        assert ids(ordered) == [2, 4, 3, 1]

    def test_input_not_mutated(self, age_rows, people_columns):
        """Test that sorting returns a new list."""
        original = list(age_rows)
        sort_rows(age_rows, [SorterEntry("age")], resolve_sorters(people_columns))
        assert age_rows == original

    def test_date_sorter(self):
        """Test that the date sorter orders by parsed timestamp."""
        rows = [
            {"id": 1, "when": "2024-03-01"},
            {"id": 2, "when": "2023-12-31"},
            {"id": 3, "when": "garbage"},
        ]
        resolved = resolve_sorters([ColumnDefinition("when", sorter="date")])
        assert ids(sort_rows(rows, [SorterEntry("when")], resolved)) == [3, 2, 1]

    def test_unknown_sorter_name_is_skipped(self, age_rows, diagnostics):
        """Test that an unknown sorter name disables sorting on that column."""
        resolved = resolve_sorters([ColumnDefinition("age", sorter="fancy")], diagnostics)
        assert resolved == {}
        assert diagnostics.sources() == ["sort"]
        assert ids(sort_rows(age_rows, [SorterEntry("age")], resolved)) == [1, 2, 3]

    def test_custom_comparator_arguments(self, age_rows):
        """Test that a custom sorter receives values, rows, column, dir and params."""
        calls = []

        def by_age(a, b, row_a, row_b, column, direction, params):
            calls.append((row_a["age"] == a, column.field, direction, params))
            return a - b

        column = ColumnDefinition("age", sorter=by_age, sorter_params={"k": 1})
        resolved = resolve_sorters([column])
        rows = sort_rows(age_rows, [SorterEntry("age", SortDirection.DESC)], resolved)
        assert ids(rows) == [3, 1, 2]
        assert calls
        assert all(call == (True, "age", "desc", {"k": 1}) for call in calls)

    def test_failing_comparator_is_reported_once(self, age_rows, diagnostics):
        """Test that a raising comparator counts as a tie and is reported once."""

        def broken(*_args):
            raise RuntimeError("boom")

        resolved = resolve_sorters([ColumnDefinition("age", sorter=broken)])
        rows = sort_rows(age_rows, [SorterEntry("age")], resolved, diagnostics)
        assert ids(rows) == [1, 2, 3]
        assert len(diagnostics.reports) == 1
        assert isinstance(diagnostics.reports[0][2], RuntimeError)

    def test_column_without_sorter_is_skipped(self):
        """Test that a column without a sorter leaves the order unchanged."""
        rows = [{"id": 1, "a": "b"}, {"id": 2, "a": "a"}]
        resolved = resolve_sorters([ColumnDefinition("a")])
        assert resolved == {}
        assert ids(sort_rows(rows, [SorterEntry("a")], resolved)) == [1, 2]


class TestWindowing:
    """Test page arithmetic."""

    def test_total_pages(self):
        """Test page counts, including the empty set."""
        assert total_pages(12, 5) == 3
        assert total_pages(10, 5) == 2
        assert total_pages(0, 5) == 1
        assert total_pages(12, 5, paginated=False) == 1

    def test_page_button_window(self):
        """Test the centred page-button window."""
        assert page_button_window(1, 10, 5) == [1, 2, 3, 4, 5]
        assert page_button_window(6, 10, 5) == [4, 5, 6, 7, 8]
        assert page_button_window(10, 10, 5) == [6, 7, 8, 9, 10]
        assert page_button_window(1, 2, 5) == [1, 2]


class TestRecompute:
    """Test the full pipeline."""

    def test_second_page(self, twelve_rows):
        """Test that page 2 of size 5 shows source rows 5..9."""
        view = recompute(
            QueryState(rows=tuple(twelve_rows), pagination=True, current_page=2, page_size=5)
        )
        assert ids(view.visible_rows) == [5, 6, 7, 8, 9]
        assert view.total_pages == 3
        assert view.total_rows == 12

    def test_page_is_clamped(self, twelve_rows):
        """Test that a page past the end is clamped to the last page."""
        view = recompute(
            QueryState(rows=tuple(twelve_rows), pagination=True, current_page=9, page_size=5)
        )
        assert view.current_page == 3
        assert ids(view.visible_rows) == [10, 11]

    def test_progressive_disables_slicing(self, twelve_rows):
        """Test that progressive mode shows the whole set."""
        view = recompute(
            QueryState(rows=tuple(twelve_rows), pagination=True, progressive=True, page_size=5)
        )
        assert len(view.visible_rows) == 12
        assert view.total_pages == 1

    def test_same_state_same_view(self, age_rows, people_columns):
        """Test that recompute is deterministic."""
        state = QueryState(
            rows=tuple(age_rows),
            filters=(FilterEntry.create("age", ">", 20),),
            sorters=(SorterEntry("age"),),
            comparators=resolve_sorters(people_columns),
        )
        assert recompute(state) == recompute(state)

    def test_pages_cover_filtered_set(self):
        """Test that pages 1..total_pages join into the full set without gaps or repeats."""
        comparators = resolve_sorters([ColumnDefinition("value", sorter="number")])
        for count in (0, 1, 5, 10, 12, 13):
            rows = tuple({"id": i, "value": (i * 7) % 5} for i in range(count))
            for page_size in (1, 3, 5, 10):
                state = QueryState(
                    rows=rows,
                    filters=(FilterEntry.create("value", "!=", 3),),
                    sorters=(SorterEntry("value", SortDirection.DESC),),
                    comparators=comparators,
                    pagination=True,
                    page_size=page_size,
                )
                first = recompute(state)
                joined = []
                for page in range(1, first.total_pages + 1):
                    joined.extend(recompute(replace(state, current_page=page)).visible_rows)
                assert joined == list(first.all_rows), (count, page_size)
                assert len(set(ids(joined))) == len(joined)
