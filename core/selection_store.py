"""
Selection state management for selectable rows.

Track which elements are selected (by equality, not by position), enforce
the single/multiple selection policy, and notify listeners when the
selection changes. No UI framework dependencies.
"""
import logging
from typing import Any, Callable, Dict, FrozenSet, Generic, Iterable, Iterator, List, Set, Union

from .data_models import SelectionMode, T

logger = logging.getLogger(__name__)

# Listeners take no arguments; they re-read the store on notification
SelectionListener = Callable[[], None]


class SelectionStore(Generic[T]):
    """
    Manages the set of selected elements with change notification.

    In single mode at most one element is selected. With
    ``require_selection`` a single selection, once made, cannot be emptied
    by ``toggle`` or ``deselect_all``; ``select_all([])`` is the one bulk
    replace that may still clear it. The store never seeds an initial
    selection itself.

    Not thread safe: call it from the thread that owns the UI state.
    Listeners must not re-enter the store.
    """

    def __init__(
        self,
        mode: Union[SelectionMode, str] = SelectionMode.MULTIPLE,
        require_selection: bool = False,
    ) -> None:
        """
        Initialize selection store.

        Args:
            mode: Selection mode, or its string value ("single"/"multiple")
            require_selection: Keep a single selection from being emptied.
                Has no effect in multiple mode.

        Raises:
            ValueError: If mode is not a known selection mode
        """
        self._mode = SelectionMode(mode)
        self._require_selection = bool(require_selection)
        self._selected: Set[T] = set()
        self._listeners: List[SelectionListener] = []

        if self._require_selection and self._mode is SelectionMode.MULTIPLE:
            logger.warning("require_selection has no effect in multiple selection mode")

    # ------------------------------------------------------------------
    def add_listener(self, callback: SelectionListener) -> None:
        """Register callback fired after each change of the selection."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: SelectionListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify_listeners(self) -> None:
        for callback in list(self._listeners):
            try:
                callback()
            except Exception as exc:
                logger.error("Selection listener error: %s", exc)

    def _commit(self, new_selection: Set[T], notify: bool) -> bool:
        """Replace the selection, notifying if it differs from the current one."""
        if new_selection == self._selected:
            return False

        logger.debug("Selection changed: %d -> %d element(s)", len(self._selected), len(new_selection))
        self._selected = new_selection

        if notify:
            self._notify_listeners()
        return True

    # ------------------------------------------------------------------
    def is_selected(self, element: T) -> bool:
        return element in self._selected

    def toggle(self, element: T, notify: bool = True) -> bool:
        """
        Flip the selection state of an element.

        Multiple mode adds or removes the element. Single mode replaces the
        current selection with the element, or clears it when the element is
        already selected (unless a selection is required, in which case
        nothing happens).

        Args:
            element: Element the user interacted with
            notify: If True, fire listeners when the selection changes

        Returns:
            True if selection changed
        """
        if self._mode is SelectionMode.MULTIPLE:
            return self._commit(self._selected ^ {element}, notify)

        if element in self._selected:
            if self._require_selection:
                logger.debug("Deselect of %r blocked: selection required", element)
                return False
            return self._commit(set(), notify)

        return self._commit({element}, notify)

    def select_all(self, elements: Iterable[T], notify: bool = True) -> bool:
        """
        Bulk-select elements.

        Single mode keeps only the first element, and an empty input clears
        the selection even when a selection is required. Multiple mode adds
        the elements to the current selection.

        Args:
            elements: Elements to select, consumed once
            notify: If True, fire listeners when the selection changes

        Returns:
            True if selection changed
        """
        if self._mode is SelectionMode.SINGLE:
            first = next(iter(elements), _MISSING)
            return self._commit(set() if first is _MISSING else {first}, notify)

        return self._commit(self._selected.union(elements), notify)

    def deselect_all(self, notify: bool = True) -> bool:
        """
        Clear the selection.

        No effect in single mode when a selection is required and present.

        Returns:
            True if selection was cleared
        """
        if self.requires_selection and self._selected:
            logger.debug("Deselect all blocked: selection required")
            return False
        return self._commit(set(), notify)

    def discard(self, elements: Iterable[T], notify: bool = True) -> bool:
        """
        Drop elements that no longer exist in the owning collection.

        Unlike ``toggle`` this ignores ``require_selection``: a removed
        element cannot stay selected.

        Returns:
            True if selection changed
        """
        return self._commit(self._selected.difference(elements), notify)

    # ------------------------------------------------------------------
    @property
    def mode(self) -> SelectionMode:
        return self._mode

    @property
    def require_selection(self) -> bool:
        return self._require_selection

    @property
    def requires_selection(self) -> bool:
        """True if this is a single-selection store that must keep a selection."""
        return self._mode is SelectionMode.SINGLE and self._require_selection

    @property
    def selected(self) -> FrozenSet[T]:
        """Snapshot of the selected elements."""
        return frozenset(self._selected)

    @property
    def selection_count(self) -> int:
        return len(self._selected)

    @property
    def has_selection(self) -> bool:
        return len(self._selected) > 0

    def __contains__(self, element: object) -> bool:
        return element in self._selected

    def __len__(self) -> int:
        return len(self._selected)

    def __iter__(self) -> Iterator[T]:
        return iter(frozenset(self._selected))

    def __repr__(self) -> str:
        return (f"SelectionStore(mode={self._mode.value}, "
                f"require_selection={self._require_selection}, selected={len(self._selected)})")

    def get_state_summary(self) -> Dict[str, Any]:
        """
        Get summary of current selection state for debugging.

        Returns:
            Dictionary with selection state information
        """
        return {
            'mode': self._mode.value,
            'require_selection': self._require_selection,
            'total_selected': len(self._selected),
            'selected': list(self._selected),
            'listener_count': len(self._listeners)
        }


_MISSING = object()
