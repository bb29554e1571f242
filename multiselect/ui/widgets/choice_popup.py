"""Choice popup listing every option with a checkbox"""

from typing import Optional
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QMenu, QLabel, QWidgetAction, QListView

from multiselect.models.selection_model import SelectionModel
from multiselect.ui.widgets.checkable_list_model import CheckableListModel
from multiselect.utils.config import Config
from multiselect.utils.constants import UIColors, PopupText

import logging
logger = logging.getLogger(__name__)


class ChoicePopup(QMenu):
    """Drop-down surface for a MultiSelectSpinner.

    Stays open while options are toggled; the OK button closes it.
    """

    def __init__(self, selection_model: SelectionModel, config: Optional[Config] = None, parent=None):
        super().__init__(parent)
        self.config = config or Config()
        self.list_model = CheckableListModel(selection_model, self)
        self.list_model.check_state_changed.connect(self.on_check_state_changed)

        self.init_ui()

    def init_ui(self):
        """Initialize the choice popup UI"""
        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(5, 5, 5, 5)
        layout.setSpacing(3)

        # Select All / Deselect All toggle
        controls_layout = QHBoxLayout()
        controls_layout.setSpacing(5)

        self.select_all_btn = QPushButton(PopupText.SELECT_ALL)
        self.select_all_btn.setStyleSheet(f"""
            QPushButton {{
                font-size: 10px;
                padding: 2px 8px;
                background-color: {UIColors.PRIMARY};
                color: white;
                border: none;
                border-radius: 3px;
            }}
            QPushButton:hover {{
                background-color: {UIColors.PRIMARY_DARK};
            }}
        """)
        self.select_all_btn.clicked.connect(self.toggle_select_all)
        controls_layout.addWidget(self.select_all_btn)
        controls_layout.addStretch()
        layout.addLayout(controls_layout)

        self.list_view = QListView()
        self.list_view.setModel(self.list_model)
        self.list_view.setMinimumWidth(self.config.popup_min_width)
        self.list_view.setMaximumWidth(self.config.popup_max_width)
        self.list_view.setMinimumHeight(self.config.popup_min_height)
        self.list_view.setMaximumHeight(self.config.popup_max_height)
        self.list_view.setStyleSheet(f"""
            QListView {{
                font-size: 10px;
                border: 1px solid {UIColors.BORDER};
                background-color: white;
            }}
            QListView::item {{
                padding: 2px;
            }}
            QListView::item:hover {{
                background-color: {UIColors.HOVER};
            }}
        """)
        layout.addWidget(self.list_view)

        self.info_label = QLabel()
        self.info_label.setStyleSheet(f"font-size: 9px; color: {UIColors.MUTED}; padding: 2px;")
        layout.addWidget(self.info_label)

        ok_btn = QPushButton(PopupText.OK)
        ok_btn.setStyleSheet(f"""
            QPushButton {{
                background-color: {UIColors.SUCCESS};
                color: white;
                border: none;
                border-radius: 3px;
                padding: 5px 15px;
                font-size: 11px;
            }}
            QPushButton:hover {{
                background-color: {UIColors.SUCCESS_DARK};
            }}
        """)
        ok_btn.clicked.connect(self.close)
        layout.addWidget(ok_btn)

        action = QWidgetAction(self)
        action.setDefaultWidget(container)
        self.addAction(action)

        self.setStyleSheet(f"""
            QMenu {{
                background-color: white;
                border: 2px solid {UIColors.PRIMARY};
                border-radius: 5px;
            }}
        """)

        self.update_controls()

    def on_check_state_changed(self, row: int, checked: bool):
        self.update_controls()

    def update_controls(self):
        """Refresh the Select All caption and the count label"""
        if self.list_model.all_checked():
            self.select_all_btn.setText(PopupText.DESELECT_ALL)
        else:
            self.select_all_btn.setText(PopupText.SELECT_ALL)

        total = self.list_model.rowCount()
        checked = self.list_model.checked_count()
        self.info_label.setText(f"{checked:,} of {total:,} selected")

    def sync_from_model(self):
        """Show flags that were changed without going through this popup"""
        self.list_model.refresh_check_states()
        self.update_controls()

    def toggle_select_all(self):
        """Toggle between select all and deselect all"""
        self.list_model.set_all_checked(not self.list_model.all_checked())
