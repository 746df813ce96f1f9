import logging
from typing import Any, List

from PySide6.QtCore import (
    Property,
    QAbstractListModel,
    QByteArray,
    QModelIndex,
    QPersistentModelIndex,
    Qt,
    Signal,
    Slot,
)

from core.ui_logic.selectable_rows import SelectableRows

logger = logging.getLogger(__name__)


class SelectableRowsModel(QAbstractListModel):
    """Qt list model exposing selectable rows and their selection state."""

    ElementRole = Qt.ItemDataRole.UserRole + 1
    IsSelectedRole = Qt.ItemDataRole.UserRole + 2
    IndicatorStyleRole = Qt.ItemDataRole.UserRole + 3
    IndicatorAlignmentRole = Qt.ItemDataRole.UserRole + 4
    IndicatorColorRole = Qt.ItemDataRole.UserRole + 5

    selectionChanged = Signal()

    def __init__(self, rows: SelectableRows) -> None:
        super().__init__()
        self.rows = rows
        self._resetting = False
        self._selection_dirty = False
        self.rows.store.add_listener(self._on_selection_changed)
        logger.info("SelectableRowsModel created with %d rows", len(self.rows))

    def rowCount(self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self.rows)

    def data(self, index: QModelIndex | QPersistentModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or index.row() >= len(self.rows):
            return None

        row = self.rows.row(index.row())

        if role == Qt.ItemDataRole.DisplayRole:
            return str(row.element)
        elif role == self.ElementRole:
            return row.element
        elif role == self.IsSelectedRole:
            return row.is_selected
        elif role == self.IndicatorStyleRole:
            return row.indicator.style.value
        elif role == self.IndicatorAlignmentRole:
            return row.indicator.alignment.value if row.indicator.alignment else ""
        elif role == self.IndicatorColorRole:
            return row.color or ""

        return None

    def roleNames(self) -> dict[int, QByteArray]:
        return {
            int(Qt.ItemDataRole.DisplayRole): QByteArray(b"display"),
            self.ElementRole: QByteArray(b"element"),
            self.IsSelectedRole: QByteArray(b"isSelected"),
            self.IndicatorStyleRole: QByteArray(b"indicatorStyle"),
            self.IndicatorAlignmentRole: QByteArray(b"indicatorAlignment"),
            self.IndicatorColorRole: QByteArray(b"indicatorColor")
        }

    @Property(int, notify=selectionChanged)
    def selectionCount(self) -> int:
        return self.rows.store.selection_count

    @Property(bool, notify=selectionChanged)
    def hasSelection(self) -> bool:
        return self.rows.store.has_selection

    @Slot(int)
    def toggleRow(self, row: int) -> None:
        self.rows.tap(row)

    @Slot()
    def selectAll(self) -> None:
        self.rows.select_all()

    @Slot()
    def deselectAll(self) -> None:
        self.rows.deselect_all()

    @Slot(list)
    def deleteItems(self, rows: List[int]) -> None:
        self._reset(self.rows.delete_items, rows)

    @Slot(list, int)
    def moveItems(self, rows: List[int], destination: int) -> None:
        self._reset(self.rows.move_items, rows, destination)

    def _reset(self, edit, *args) -> None:
        """Apply a structural edit, deferring selection signals until the reset ends."""
        self._resetting = True
        self.beginResetModel()
        try:
            edit(*args)
        except IndexError as exc:
            logger.warning("Row edit rejected: %s", exc)
        finally:
            self.endResetModel()
            self._resetting = False

        if self._selection_dirty:
            self._selection_dirty = False
            self.selectionChanged.emit()

    def _on_selection_changed(self) -> None:
        if self._resetting:
            self._selection_dirty = True
            return

        if len(self.rows):
            top = self.index(0, 0)
            bottom = self.index(len(self.rows) - 1, 0)
            self.dataChanged.emit(top, bottom, [self.IsSelectedRole])
        self.selectionChanged.emit()

    def cleanup(self) -> None:
        """Detach from the selection store."""
        self.rows.store.remove_listener(self._on_selection_changed)
