#!/usr/bin/env python3
"""MultiSelect Spinner demo - Main entry point"""

import sys
import logging
from PyQt6.QtWidgets import QApplication
from multiselect.demo_window import DemoWindow
from multiselect.utils.config import load_config
from multiselect.utils.logger import setup_logging, install_hooks

logger = logging.getLogger(__name__)


def main():
    """Application entry point"""
    # Load configuration
    config = load_config()

    # Set up logging
    setup_logging(config.log_dir, config.log_level)
    install_hooks()
    logger.info("=" * 60)
    logger.info("MultiSelect Spinner Demo Starting")
    logger.info("=" * 60)
    logger.info(f"Configuration loaded: {config.app_name} v{config.version}")

    # Create Qt application
    app = QApplication(sys.argv)
    app.setApplicationName(config.app_name)
    app.setOrganizationName(config.organization_name)

    logger.info("Qt application created")

    # Create and show demo window
    try:
        window = DemoWindow(config)
        window.show()
        logger.info("Demo window displayed")
    except Exception as e:
        logger.error(f"Failed to create demo window: {e}", exc_info=True)
        sys.exit(1)

    # Start event loop
    logger.info("Starting Qt event loop")
    exit_code = app.exec()
    logger.info(f"Application exiting with code: {exit_code}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
