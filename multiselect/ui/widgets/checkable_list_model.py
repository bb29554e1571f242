"""Qt item model exposing a SelectionModel as a checkable list"""

from PyQt6.QtCore import Qt, QAbstractListModel, QModelIndex, pyqtSignal

from multiselect.models.selection_model import SelectionModel, OutOfRangeError

import logging
logger = logging.getLogger(__name__)


def _to_check_state(value) -> Qt.CheckState:
    # Views hand over the raw int, Python callers usually pass the enum
    if isinstance(value, Qt.CheckState):
        return value
    return Qt.CheckState(int(value))


class CheckableListModel(QAbstractListModel):
    """Lightweight adapter - labels for display, flags for check state.

    Holds no selection state of its own: every check edit becomes one
    SelectionModel.toggle() call.
    """

    check_state_changed = pyqtSignal(int, bool)  # row (-1 for all rows), checked

    def __init__(self, selection_model: SelectionModel, parent=None):
        super().__init__(parent)
        self._selection = selection_model
        self._labels = selection_model.get_items()

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._labels)

    def data(self, index, role=Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or index.row() >= len(self._labels):
            return None

        if role == Qt.ItemDataRole.DisplayRole:
            return self._labels[index.row()]
        elif role == Qt.ItemDataRole.CheckStateRole:
            if index.row() >= len(self._selection):
                return None
            if self._selection.is_selected(index.row()):
                return Qt.CheckState.Checked
            return Qt.CheckState.Unchecked

        return None

    def setData(self, index, value, role=Qt.ItemDataRole.EditRole):
        if not index.isValid() or role != Qt.ItemDataRole.CheckStateRole:
            return False

        row = index.row()
        checked = _to_check_state(value) == Qt.CheckState.Checked
        try:
            self._selection.toggle(row, checked)
        except OutOfRangeError as e:
            # Called from the view, so the edit is refused rather than raised into Qt
            logger.error(f"Choice list out of sync with selection model: {e}")
            return False

        self.dataChanged.emit(index, index, [role])
        self.check_state_changed.emit(row, checked)
        return True

    def flags(self, index):
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        return Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsUserCheckable | Qt.ItemFlag.ItemIsSelectable

    def set_all_checked(self, checked: bool):
        """Check or uncheck all items"""
        self._selection.set_all(checked)
        self.refresh_check_states()
        self.check_state_changed.emit(-1, checked)

    def refresh_check_states(self):
        """Repaint every check box after the selection changed outside the view"""
        if self._labels:
            self.dataChanged.emit(self.index(0), self.index(len(self._labels) - 1),
                                  [Qt.ItemDataRole.CheckStateRole])

    def checked_count(self) -> int:
        return self._selection.selected_count()

    def all_checked(self) -> bool:
        return bool(self._labels) and self._selection.selected_count() == len(self._labels)

    def reload(self):
        """Pick up a new option list from the selection model"""
        self.beginResetModel()
        self._labels = self._selection.get_items()
        self.endResetModel()
