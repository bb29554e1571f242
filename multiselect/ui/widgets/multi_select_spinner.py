"""
Multi-Select Spinner

A combo-box style trigger whose drop-down stays open so several options can
be checked. The trigger shows the selected labels as one comma-joined line.
"""
from typing import Any, Iterable, List, Optional
from PyQt6.QtWidgets import QComboBox
from PyQt6.QtCore import QStringListModel, pyqtSignal

from multiselect.models.selection_model import SelectionModel, UnsupportedOperationError
from multiselect.ui.widgets.choice_popup import ChoicePopup
from multiselect.utils.config import Config

import logging
logger = logging.getLogger(__name__)


class MultiSelectSpinner(QComboBox):
    """Drop-down control backed by a SelectionModel.

    The options can only be changed through set_items(); setModel(), clear()
    and the other QComboBox item methods are rejected.
    """

    selection_changed = pyqtSignal(list)  # selected indices

    def __init__(self, parent=None, config: Optional[Config] = None):
        super().__init__(parent)
        self.config = config or Config()
        self._selection = SelectionModel(separator=self.config.summary_separator)

        # Single row holding the summary text
        self._summary_model = QStringListModel(self)
        super().setModel(self._summary_model)

        self._popup: Optional[ChoicePopup] = None
        self._refresh_display()

    # ------------------------------------------------------------------
    # Data source guard
    # ------------------------------------------------------------------

    def setModel(self, model):
        if model is not self._summary_model:
            raise UnsupportedOperationError("setModel is not supported by MultiSelectSpinner, use set_items")
        super().setModel(model)

    def _reject_item_edit(self, *args, **kwargs):
        raise UnsupportedOperationError("MultiSelectSpinner items can only be set with set_items")

    addItem = _reject_item_edit
    addItems = _reject_item_edit
    insertItem = _reject_item_edit
    insertItems = _reject_item_edit
    removeItem = _reject_item_edit
    setItemText = _reject_item_edit
    clear = _reject_item_edit

    # ------------------------------------------------------------------
    # Model pass-throughs
    # ------------------------------------------------------------------

    def selection_model(self) -> SelectionModel:
        return self._selection

    def set_items(self, labels: Iterable[str]):
        """Replace the options; clears the selection"""
        self.hidePopup()
        self._selection.set_items(labels)
        self._refresh_display()

    def set_ids(self, ids: Iterable[Any]):
        self._selection.set_ids(ids)

    def set_selection_by_label(self, labels: Iterable[str]):
        self._selection.set_selection_by_label(labels)
        self._sync_popup()
        self._on_selection_changed()

    def set_selection_by_index(self, indices: Iterable[int]):
        try:
            self._selection.set_selection_by_index(indices)
        finally:
            # Indices before a bad one are already applied
            self._sync_popup()
            self._on_selection_changed()

    def get_selected_labels(self) -> List[str]:
        return self._selection.get_selected_labels()

    def get_selected_indices(self) -> List[int]:
        return self._selection.get_selected_indices()

    def get_selected_ids(self) -> List[Any]:
        return self._selection.get_selected_ids()

    def build_summary(self) -> str:
        return self._selection.build_summary()

    # ------------------------------------------------------------------
    # Popup handling
    # ------------------------------------------------------------------

    def choice_popup(self) -> Optional[ChoicePopup]:
        """The open choice popup, if any"""
        return self._popup

    def showPopup(self):
        """Show the checkable option list below the trigger"""
        if self._popup is not None and self._popup.isVisible():
            return

        self._popup = ChoicePopup(self._selection, self.config, self)
        self._popup.list_model.check_state_changed.connect(self._on_choice_toggled)
        self._popup.aboutToHide.connect(self._on_popup_closed)
        self._popup.setMinimumWidth(self.width())

        logger.debug(f"Opening choice popup with {len(self._selection)} option(s)")
        self._popup.popup(self.mapToGlobal(self.rect().bottomLeft()))

    def hidePopup(self):
        if self._popup is not None:
            # close() only emits aboutToHide for a visible popup
            self._popup.close()
            self._on_popup_closed()
        super().hidePopup()

    def _on_popup_closed(self):
        if self._popup is None:
            return
        logger.debug(f"Choice popup closed, selection: {self.build_summary()!r}")
        popup, self._popup = self._popup, None
        popup.deleteLater()

    def _sync_popup(self):
        if self._popup is not None:
            self._popup.sync_from_model()

    def _on_choice_toggled(self, row: int, checked: bool):
        self._on_selection_changed()

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def _on_selection_changed(self):
        self._refresh_display()
        self.selection_changed.emit(self._selection.get_selected_indices())

    def _refresh_display(self):
        """Show the current summary, or the placeholder when nothing is selected"""
        summary = self._selection.build_summary()
        self._summary_model.setStringList([summary or self.config.placeholder_text])
        self.setCurrentIndex(0)
        self.setToolTip(summary)
