"""Constants used throughout the multi-select spinner package"""

# Text placed between selected labels in the summary
SUMMARY_SEPARATOR = ", "


# UI Colors
class UIColors:
    """UI color constants"""
    PRIMARY = "#3498db"
    PRIMARY_DARK = "#2980b9"
    SUCCESS = "#27ae60"
    SUCCESS_DARK = "#229954"
    BORDER = "#ccc"
    MUTED = "#666"
    HOVER = "#e8f0fa"


# Choice popup button captions
class PopupText:
    """Captions shown in the choice popup"""
    SELECT_ALL = "Select All"
    DESELECT_ALL = "Deselect All"
    OK = "OK"
