"""
UI Widgets Package

Multi-select spinner and the pieces of its drop-down.
"""
from .checkable_list_model import CheckableListModel
from .choice_popup import ChoicePopup
from .multi_select_spinner import MultiSelectSpinner

__all__ = ['CheckableListModel', 'ChoicePopup', 'MultiSelectSpinner']
