"""Logging configuration for the multi-select spinner.

Besides the file/console setup this routes Qt's own diagnostics and any
exception escaping a slot into the same log.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

from PyQt6.QtCore import qInstallMessageHandler, QtMsgType

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Qt message type -> logging level
QT_LOG_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}

qt_logger = logging.getLogger("multiselect.qt")


def setup_logging(log_dir: str = None, log_level: str = "INFO", console: bool = True):
    """
    Set up logging configuration

    Args:
        log_dir: Directory for log files. If None, uses ~/.multiselect/logs
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console: Also echo INFO and above to stdout

    Returns:
        Path of the log file
    """
    log_dir = Path(log_dir) if log_dir is not None else Path.home() / '.multiselect' / 'logs'
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root.handlers.clear()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(console_handler)

    log_file = log_dir / 'multiselect.log'
    file_handler = RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=30)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        LOG_FORMAT + ' - [%(filename)s:%(lineno)d]', datefmt=DATE_FORMAT
    ))
    root.addHandler(file_handler)

    root.info(f"Logging initialized, log file: {log_file}")
    return log_file


def qt_message_handler(mode, context, message):
    """Forward a Qt diagnostic to the multiselect.qt logger"""
    level = QT_LOG_LEVELS.get(mode, logging.WARNING)
    qt_logger.log(level, message)


def log_unhandled_exception(exc_type, exc_value, exc_traceback):
    """sys.excepthook replacement; PyQt6 aborts on uncaught slot errors without one"""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logging.getLogger("multiselect").critical(
        "Unhandled exception", exc_info=(exc_type, exc_value, exc_traceback)
    )


def install_hooks():
    """Route Qt messages and uncaught exceptions into logging"""
    qInstallMessageHandler(qt_message_handler)
    sys.excepthook = log_unhandled_exception
