"""
Logging configuration for the status_reporting package's own diagnostics.

Status lines themselves never pass through ``logging``; this only controls the
records the package emits about itself (for example dropped lines).
"""

import logging
import sys
import threading

_config_lock = threading.Lock()
_PACKAGE_LOGGER_NAME = "status_reporting"
_HANDLER_MARKER = "_status_reporting_handler"


def _build_console_handler(verbose: bool) -> logging.Handler:
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    setattr(console_handler, _HANDLER_MARKER, True)
    return console_handler


def _remove_installed_handlers(package_logger: logging.Logger) -> None:
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            package_logger.removeHandler(handler)
            handler.close()


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Install a single stderr handler on the package logger and return it."""

    with _config_lock:
        package_logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
        _remove_installed_handlers(package_logger)
        package_logger.addHandler(_build_console_handler(verbose))
        package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
        return package_logger
