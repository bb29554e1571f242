"""Configuration management for the multi-select spinner"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from multiselect.utils.constants import SUMMARY_SEPARATOR


@dataclass
class Config:
    """Application configuration"""

    app_name: str = "MultiSelect Spinner Demo"
    organization_name: str = "MultiSelect"
    version: str = "1.0.0"

    # Demo window settings
    window_width: int = 420
    window_height: int = 160

    # Choice popup settings
    popup_min_width: int = 200
    popup_max_width: int = 400
    popup_min_height: int = 120
    popup_max_height: int = 400

    # Trigger display
    placeholder_text: str = ""
    summary_separator: str = SUMMARY_SEPARATOR

    # Logging
    log_dir: Optional[str] = None
    log_level: str = "INFO"


def load_config() -> Config:
    """Load configuration (currently returns defaults)"""
    config = Config()

    # Set up default paths
    home = Path.home()
    app_dir = home / '.multiselect'
    app_dir.mkdir(exist_ok=True)

    config.log_dir = str(app_dir / 'logs')
    Path(config.log_dir).mkdir(exist_ok=True)

    return config
