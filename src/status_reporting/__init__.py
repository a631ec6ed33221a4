"""Timestamped execution, warning and error status lines for stdout/stderr."""

import logging

from .errors import StatusLineParseError, WriteFailure
from .status_data_models import WRITE_FAILURE, StatusKind, StatusMessage, WriteResult
from .status_reporter import (
    StatusReporter,
    get_default_reporter,
    report,
    report_error,
    report_execution,
    report_warning,
    set_default_reporter,
    show_status,
)
from .status_reporter_helpers import ParsedStatusLine, parse_status_line

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ParsedStatusLine",
    "StatusKind",
    "StatusLineParseError",
    "StatusMessage",
    "StatusReporter",
    "WRITE_FAILURE",
    "WriteFailure",
    "WriteResult",
    "get_default_reporter",
    "parse_status_line",
    "report",
    "report_error",
    "report_execution",
    "report_warning",
    "set_default_reporter",
    "show_status",
]
