"""Module: selection_store.py

Date: 2026-02-10

Selection Store - row selection independent of filtering, sorting and paging.

Selected identities are kept in selection order. Identities whose row has
left the collection (for example after ``set_rows``) are skipped at read
time; ``purge`` removes one eagerly when its row is deleted.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any

from gridcore.app.state.identity import RowPosition
from gridcore.utils.events import Observable, Signal
from gridcore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# identity -> row payload, or None when no row has that identity
RowResolver = Callable[[Hashable], Any]


def _as_identities(identities: Hashable | Iterable[Hashable]) -> list[Hashable]:
    if isinstance(identities, (list, set, frozenset)):
        return list(identities)
    return [identities]


class SelectionStore(Observable):
    """Tracks selected row identities.

    Signals:
        selection_changed: list of selected identities still present
    """

    selection_changed = Signal(list)

    def __init__(self, resolver: RowResolver) -> None:
        """Initialize the selection store.

        Args:
            resolver: Maps an identity to its current row, or None if absent

        """
        super().__init__()
        self._resolver = resolver
        self._selected: dict[Hashable, None] = {}
        logger.debug("SelectionStore initialized", extra={"dev_only": True})

    # =====================================
    # Queries
    # =====================================

    def _is_present(self, identity: Hashable) -> bool:
        return self._resolver(identity) is not None

    def is_selected(self, identity: Hashable) -> bool:
        return identity in self._selected and self._is_present(identity)

    def get_selected_identities(self) -> list[Hashable]:
        """Selected identities whose rows are still in the collection."""
        return [identity for identity in self._selected if self._is_present(identity)]

    def get_selected_data(self) -> list[Any]:
        """Current row payloads for the selection, skipping identities no longer present."""
        rows = []
        for identity in self._selected:
            row = self._resolver(identity)
            if row is not None:
                rows.append(row)
        return rows

    def get_selection_count(self) -> int:
        return len(self.get_selected_identities())

    # =====================================
    # Mutations
    # =====================================

    def select_row(self, identities: Hashable | Iterable[Hashable]) -> None:
        """Select one identity or a list of them. Unknown identities are ignored."""
        changed = False
        for identity in _as_identities(identities):
            if identity in self._selected:
                continue
            if not self._is_present(identity):
                logger.debug(
                    "Ignoring selection of unknown row %r", identity, extra={"dev_only": True}
                )
                continue
            self._selected[identity] = None
            changed = True
        if changed:
            self._emit_changed()

    def deselect_row(self, identities: Hashable | Iterable[Hashable]) -> None:
        changed = False
        for identity in _as_identities(identities):
            if identity in self._selected:
                del self._selected[identity]
                changed = True
        if changed:
            self._emit_changed()

    def toggle_select_row(self, identity: Hashable) -> None:
        if identity in self._selected:
            self.deselect_row(identity)
        else:
            self.select_row(identity)

    def clear_selection(self) -> None:
        if not self._selected:
            return
        self._selected.clear()
        self._emit_changed()

    def purge(self, identity: Hashable, *, emit_signal: bool = True) -> bool:
        """Drop ``identity`` because its row was deleted. Returns whether it was selected."""
        if identity not in self._selected:
            return False
        del self._selected[identity]
        if emit_signal:
            self._emit_changed()
        return True

    def shift_positions(self, start: int, delta: int) -> None:
        """Move positional identities at or after ``start`` by ``delta``.

        Keeps positional selections attached to the same rows when rows are
        inserted before them or deleted ahead of them.
        """
        if not any(isinstance(identity, RowPosition) for identity in self._selected):
            return
        shifted: dict[Hashable, None] = {}
        for identity in self._selected:
            if isinstance(identity, RowPosition) and identity.index >= start:
                identity = identity.shifted(delta)
            shifted[identity] = None
        self._selected = shifted

    def _emit_changed(self) -> None:
        identities = self.get_selected_identities()
        logger.debug("Selection changed: %d rows", len(identities), extra={"dev_only": True})
        self.selection_changed.emit(identities)
