"""Helper modules for StatusReporter - slim coordinator pattern."""

from .line_formatter import LineFormatter
from .line_parser import ParsedStatusLine, parse_status_line
from .output_writer import OutputWriter
from .stream_selector import STDERR_NAME, STDOUT_NAME, StreamSelector
from .timestamp_formatter import TIMESTAMP_FORMAT, TimestampFormatter

__all__ = [
    "LineFormatter",
    "OutputWriter",
    "ParsedStatusLine",
    "STDERR_NAME",
    "STDOUT_NAME",
    "StreamSelector",
    "TIMESTAMP_FORMAT",
    "TimestampFormatter",
    "parse_status_line",
]
