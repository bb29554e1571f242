"""Demo window showing a MultiSelectSpinner and the ids it resolves to"""

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel

from multiselect.ui.widgets import MultiSelectSpinner
from multiselect.utils.config import Config

import logging
logger = logging.getLogger(__name__)

SAMPLE_OPTIONS = [
    (101, "Monday"),
    (102, "Tuesday"),
    (103, "Wednesday"),
    (104, "Thursday"),
    (105, "Friday"),
    (106, "Saturday"),
    (107, "Sunday"),
]


class DemoWindow(QWidget):
    """Small window with one spinner and a label echoing the selected ids"""

    def __init__(self, config: Config = None):
        super().__init__()
        self.config = config or Config()
        self.setWindowTitle(self.config.app_name)
        self.resize(self.config.window_width, self.config.window_height)

        layout = QVBoxLayout(self)

        layout.addWidget(QLabel("Working days:"))

        self.spinner = MultiSelectSpinner(self, self.config)
        self.spinner.set_items([label for _, label in SAMPLE_OPTIONS])
        self.spinner.set_ids([option_id for option_id, _ in SAMPLE_OPTIONS])
        self.spinner.set_selection_by_label(["Monday", "Friday"])
        self.spinner.selection_changed.connect(self.on_selection_changed)
        layout.addWidget(self.spinner)

        self.ids_label = QLabel()
        self.ids_label.setStyleSheet("font-size: 10px; color: #666;")
        layout.addWidget(self.ids_label)
        layout.addStretch()

        self.on_selection_changed(self.spinner.get_selected_indices())

    def on_selection_changed(self, indices):
        ids = self.spinner.get_selected_ids()
        logger.info(f"Selection changed: indices={indices} ids={ids}")
        self.ids_label.setText("Selected ids: " + (", ".join(str(i) for i in ids) or "(none)"))
