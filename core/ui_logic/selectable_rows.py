"""
Row list controller for selectable rows.

Own the displayed elements, resolve per-row indicator colors, and handle
delete/move edits while keeping the selection store consistent. No UI
framework dependencies - any backend can draw the RowState snapshots.
"""
import logging
from typing import TYPE_CHECKING, Generic, Iterable, List, Optional, Sequence

from ..data_models import Color, ColorProvider, RowState, SelectionIndicator, T
from ..selection_store import SelectionStore

if TYPE_CHECKING:
    from config.base import BaseConfiguration

logger = logging.getLogger(__name__)


class SelectableRows(Generic[T]):
    """
    A list of elements bound to a selection store.

    The element list is owned here; the store only tracks identities.
    Moving rows never changes the selection, deleting rows drops the
    deleted elements from it.
    """

    def __init__(
        self,
        elements: Iterable[T],
        store: Optional[SelectionStore[T]] = None,
        *,
        indicator: Optional[SelectionIndicator] = None,
        color: Optional[Color] = None,
        color_provider: Optional[ColorProvider] = None,
    ) -> None:
        """
        Initialize row controller.

        Args:
            elements: Initial elements, copied
            store: Selection store, a multiple-selection store if omitted
            indicator: Indicator style, tap on element if omitted
            color: Uniform indicator color for every row
            color_provider: Per-element indicator color, used when no
                uniform color is set
        """
        self._elements: List[T] = list(elements)
        self.store: SelectionStore[T] = store if store is not None else SelectionStore()
        self.indicator = indicator or SelectionIndicator.tap_on_element()
        self.color = color
        self.color_provider = color_provider

    @classmethod
    def from_config(cls, elements: Iterable[T], config: "BaseConfiguration",
                    color_provider: Optional[ColorProvider] = None) -> "SelectableRows[T]":
        """Build rows with mode, indicator and color taken from configuration."""
        store: SelectionStore[T] = SelectionStore(config.selection_mode, config.require_selection)
        rows = cls(
            elements,
            store,
            indicator=config.indicator,
            color=config.selector_color,
            color_provider=color_provider,
        )
        logger.info("Selectable rows created: %d elements, %s, %s",
                    len(rows), store.mode.value, rows.indicator)
        return rows

    # ------------------------------------------------------------------
    @property
    def elements(self) -> List[T]:
        """Copy of the elements in display order."""
        return list(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def indicator_color(self, element: T) -> Optional[Color]:
        """
        Resolve the indicator color for an element.

        Returns:
            Uniform color if set, else the provider's color, else None
        """
        if self.color is not None:
            return self.color
        if self.color_provider is None:
            return None
        return self.color_provider(element)

    def row(self, index: int) -> RowState[T]:
        element = self._elements[index]
        return RowState(
            index=index,
            element=element,
            is_selected=self.store.is_selected(element),
            indicator=self.indicator,
            color=self.indicator_color(element),
        )

    def rows(self) -> List[RowState[T]]:
        return [self.row(index) for index in range(len(self._elements))]

    # ------------------------------------------------------------------
    def tap(self, index: int) -> bool:
        """
        Handle user interaction with the row at index.

        Returns:
            True if selection changed
        """
        if not 0 <= index < len(self._elements):
            logger.debug("Ignoring tap on missing row %d", index)
            return False
        return self.store.toggle(self._elements[index])

    def select_all(self) -> bool:
        return self.store.select_all(self._elements)

    def deselect_all(self) -> bool:
        return self.store.deselect_all()

    def seed_required_selection(self) -> bool:
        """
        Select the first element when a selection is required but missing.

        Returns:
            True if a selection was seeded
        """
        if not self.store.requires_selection or self.store.has_selection or not self._elements:
            return False
        return self.store.toggle(self._elements[0])

    def delete_items(self, indices: Iterable[int]) -> List[T]:
        """
        Remove the elements at the given offsets.

        Deleted elements that no longer appear in the list are dropped from
        the selection.

        Args:
            indices: Offsets into the current list, any order

        Returns:
            Removed elements in their original order

        Raises:
            IndexError: If an offset is out of range
        """
        offsets = sorted(set(indices))
        for offset in offsets:
            if not 0 <= offset < len(self._elements):
                raise IndexError(f"Row index out of range: {offset}")

        removed = [self._elements[offset] for offset in offsets]
        for offset in reversed(offsets):
            del self._elements[offset]

        remaining = set(self._elements)
        self.store.discard([element for element in removed if element not in remaining])

        logger.debug("Deleted %d row(s), %d remaining", len(removed), len(self._elements))
        return removed

    def move_items(self, source: Iterable[int], destination: int) -> None:
        """
        Move the elements at the source offsets to destination.

        Args:
            source: Offsets of the rows to move
            destination: Insertion offset in the list before the move,
                from 0 to len(rows)

        Raises:
            IndexError: If an offset or the destination is out of range
        """
        offsets = sorted(set(source))
        count = len(self._elements)
        if not 0 <= destination <= count:
            raise IndexError(f"Destination out of range: {destination}")
        for offset in offsets:
            if not 0 <= offset < count:
                raise IndexError(f"Row index out of range: {offset}")

        moving = [self._elements[offset] for offset in offsets]
        kept: List[T] = []
        insert_at = 0
        moving_offsets = set(offsets)
        for offset, element in enumerate(self._elements):
            if offset in moving_offsets:
                continue
            if offset < destination:
                insert_at += 1
            kept.append(element)

        self._elements = kept[:insert_at] + moving + kept[insert_at:]
        logger.debug("Moved %d row(s) to %d", len(moving), destination)

    def selection_summary(self, title: str) -> str:
        return f"{title}: {self.store.selection_count} selected"

    def selected_in_order(self) -> List[T]:
        """Selected elements in display order."""
        return [element for element in self._elements if self.store.is_selected(element)]

    def set_elements(self, elements: Sequence[T]) -> None:
        """Replace the element list, dropping selections that vanished."""
        self._elements = list(elements)
        remaining = set(self._elements)
        self.store.discard([element for element in self.store.selected if element not in remaining])
