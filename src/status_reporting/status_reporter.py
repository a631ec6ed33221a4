"""
Timestamped status lines for execution, warning and error messages.

Execution messages go to stdout; warnings and errors go to stderr. Every line
starts with ``YYYY-MM-DD HH:MM:SS> ``; the rest of the layout depends on which
of app name and caller are given (see ``LineFormatter``).
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO, Union

from .config import (
    ConfigurationError,
    ReporterSettings,
    load_app_name_setting,
    load_flush_setting,
    load_timezone_setting,
    validate_timezone_name,
)
from .status_data_models import StatusKind, StatusMessage, WriteResult
from .status_reporter_helpers import (
    LineFormatter,
    OutputWriter,
    StreamSelector,
    TimestampFormatter,
)
from .status_reporter_helpers.timestamp_formatter import Clock

logger = logging.getLogger(__name__)

KindLike = Union[StatusKind, int, str]


class StatusReporter:
    """
    Formats status messages and writes them to the stream matching their kind.

    No locking is done; concurrent callers get whatever interleaving the
    underlying streams give a single ``write`` call.
    """

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        clock: Optional[Clock] = None,
        flush: Optional[bool] = None,
        timezone_name: Optional[str] = None,
        default_app_name: Optional[str] = None,
        settings: Optional[ReporterSettings] = None,
    ):
        # Explicit arguments win; the environment is only consulted for missing ones
        if flush is None:
            flush = settings.flush if settings is not None else load_flush_setting()
        if timezone_name is None:
            timezone_name = settings.timezone_name if settings is not None else load_timezone_setting()
        else:
            validate_timezone_name(timezone_name, "timezone_name")
        if default_app_name is None:
            default_app_name = settings.default_app_name if settings is not None else load_app_name_setting()

        self.default_app_name = default_app_name
        self._streams = StreamSelector(stdout, stderr)
        self._timestamps = TimestampFormatter(clock, timezone_name)
        self._writer = OutputWriter(flush)

    def format(self, message: StatusMessage) -> str:
        """Render ``message`` with the current timestamp, without writing it."""
        return LineFormatter.format(message, self._timestamps.current_timestamp())

    def emit(self, message: StatusMessage) -> WriteResult:
        stream_name, stream = self._streams.select(message.kind)
        line = self.format(message)
        return self._writer.write(line, stream, stream_name)

    def report(
        self,
        kind: KindLike,
        text: str,
        caller: Optional[str] = None,
        app_name: Optional[str] = None,
    ) -> WriteResult:
        """
        Write one status line.

        Args:
            kind: Status kind (member, integer value or name)
            text: Message body, may be empty
            caller: Reporting function or context; omitted when None
            app_name: Invoking application; falls back to ``default_app_name``

        Returns:
            WriteResult holding the characters written or the WriteFailure
        """
        if app_name is None:
            app_name = self.default_app_name
        message = StatusMessage(StatusKind.coerce(kind), text, caller, app_name)
        result = self.emit(message)
        if not result.ok:
            logger.debug("Status report of kind %s was not written", message.kind.name)
        return result

    def report_execution(self, text: str, caller: Optional[str] = None, app_name: Optional[str] = None) -> WriteResult:
        return self.report(StatusKind.EXECUTION, text, caller, app_name)

    def report_error(self, text: str, caller: Optional[str] = None, app_name: Optional[str] = None) -> WriteResult:
        return self.report(StatusKind.ERROR, text, caller, app_name)

    def report_warning(self, text: str, caller: Optional[str] = None, app_name: Optional[str] = None) -> WriteResult:
        return self.report(StatusKind.WARNING, text, caller, app_name)

    def show_status(
        self,
        kind: KindLike,
        text: str,
        caller: Optional[str] = None,
        app_name: Optional[str] = None,
    ) -> int:
        """Same as ``report`` but returns the character count, or -1 on failure."""
        return self.report(kind, text, caller, app_name).status_code


_default_reporter: Optional[StatusReporter] = None


def get_default_reporter() -> StatusReporter:
    """Return the process-wide reporter, creating it from settings on first use.

    Invalid ``STATUS_REPORTER_*`` values are logged and replaced by the built-in
    defaults, so the module-level ``report*`` functions never raise on them.
    """
    global _default_reporter
    if _default_reporter is None:
        try:
            _default_reporter = StatusReporter()
        except ConfigurationError as exc:
            logger.warning("Ignoring invalid status reporter settings, using defaults: %s", exc)
            _default_reporter = StatusReporter(settings=ReporterSettings())
    return _default_reporter


def set_default_reporter(reporter: Optional[StatusReporter]) -> None:
    """Replace the process-wide reporter; ``None`` rebuilds it on next use."""
    global _default_reporter
    _default_reporter = reporter


def report(kind: KindLike, text: str, caller: Optional[str] = None, app_name: Optional[str] = None) -> WriteResult:
    return get_default_reporter().report(kind, text, caller, app_name)


def report_execution(text: str, caller: Optional[str] = None, app_name: Optional[str] = None) -> WriteResult:
    return get_default_reporter().report_execution(text, caller, app_name)


def report_error(text: str, caller: Optional[str] = None, app_name: Optional[str] = None) -> WriteResult:
    return get_default_reporter().report_error(text, caller, app_name)


def report_warning(text: str, caller: Optional[str] = None, app_name: Optional[str] = None) -> WriteResult:
    return get_default_reporter().report_warning(text, caller, app_name)


def show_status(kind: KindLike, text: str, caller: Optional[str] = None, app_name: Optional[str] = None) -> int:
    return get_default_reporter().show_status(kind, text, caller, app_name)
