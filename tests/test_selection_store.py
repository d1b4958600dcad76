"""
Tests for SelectionStore, through the TableStore that owns it.

Date: 2026-02-10
"""

from gridcore.app.state import RowPosition, SelectionStore, TableStore


class TestSelection:
    """Test selecting and deselecting rows."""

    def test_select_and_read_back(self, age_rows):
        """Test selected identities and payloads."""
        store = TableStore(age_rows)
        store.selection.select_row([3, 1])
        assert store.selection.get_selected_identities() == [3, 1]
        assert [row["id"] for row in store.selection.get_selected_data()] == [3, 1]
        assert store.selection.get_selection_count() == 2

    def test_unknown_identity_ignored(self, age_rows):
        """Test that selecting a missing row does nothing."""
        store = TableStore(age_rows)
        changes = []
        store.selection.selection_changed.connect(changes.append)
        store.selection.select_row(42)
        assert store.selection.get_selected_identities() == []
        assert changes == []

    def test_toggle_and_clear(self, age_rows):
        """Test toggling and clearing."""
        store = TableStore(age_rows)
        store.selection.toggle_select_row(2)
        assert store.selection.is_selected(2)
        store.selection.toggle_select_row(2)
        assert not store.selection.is_selected(2)
        store.selection.select_row([1, 2])
        store.selection.clear_selection()
        assert store.selection.get_selection_count() == 0

    def test_selection_changed_payload(self, age_rows):
        """Test that selection_changed carries the selected identities."""
        store = TableStore(age_rows)
        changes = []
        store.selection.selection_changed.connect(changes.append)
        store.selection.select_row(1)
        store.selection.deselect_row(1)
        assert changes == [[1], []]

    def test_selection_survives_filter_sort_and_paging(self, twelve_rows):
        """Test that selection is independent of the current view."""
        store = TableStore(twelve_rows, pagination=True, page_size=5)
        store.selection.select_row([0, 11])
        store.set_filter("id", ">", 5)
        store.set_page(2)
        assert store.selection.get_selected_identities() == [0, 11]
        store.clear_filter()
        assert store.selection.is_selected(0)


class TestSelectionAfterMutation:
    """Test selection consistency when rows change."""

    def test_deleted_row_leaves_selection(self, age_rows):
        """Test that deleting a selected row removes it from the selection."""
        store = TableStore(age_rows)
        store.selection.select_row(2)
        changes = []
        store.selection.selection_changed.connect(changes.append)
        store.delete_row(1)
        assert store.selection.get_selected_identities() == []
        assert store.selection.get_selected_data() == []
        assert changes == [[]]

    def test_replaced_rows_drop_missing_identities(self, age_rows):
        """Test that identities absent after set_rows are not reported."""
        store = TableStore(age_rows)
        store.selection.select_row([1, 2])
        store.set_rows([{"id": 2, "age": 1}])
        assert store.selection.get_selected_identities() == [2]
        assert store.selection.get_selected_data() == [{"id": 2, "age": 1}]

    def test_selected_data_reflects_updates(self, age_rows):
        """Test that payloads are read at call time."""
        store = TableStore(age_rows)
        store.selection.select_row(3)
        store.update_rows([{"id": 3, "age": 40}])
        assert store.selection.get_selected_data()[0]["age"] == 40

    def test_positional_selection_follows_rows(self):
        """Test that positional identities shift with inserts and deletes."""
        store = TableStore([{"v": "a"}, {"v": "b"}, {"v": "c"}])
        store.selection.select_row(RowPosition(1))
        store.add_rows([{"v": "z"}], at_top=True)
        assert store.selection.get_selected_data() == [{"v": "b"}]
        store.delete_row(0)
        assert store.selection.get_selected_identities() == [RowPosition(1)]
        assert store.selection.get_selected_data() == [{"v": "b"}]


class TestSelectionStoreResolver:
    """Test the store against a plain resolver."""

    def test_resolver_controls_presence(self):
        """Test that presence is decided by the resolver."""
        rows = {"a": {"id": "a"}}
        selection = SelectionStore(rows.get)
        selection.select_row(["a", "b"])
        assert selection.get_selected_identities() == ["a"]
        rows.pop("a")
        assert selection.get_selected_identities() == []
        assert not selection.is_selected("a")
