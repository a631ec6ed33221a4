"""Error types for status reporting."""

from __future__ import annotations

from typing import Optional


class WriteFailure(Exception):
    """A status line could not be written to its destination stream.

    Instances are returned inside a ``WriteResult`` rather than raised; the
    caller decides whether a lost status line is fatal.
    """

    def __init__(self, stream_name: str, cause: Optional[BaseException] = None) -> None:
        message = f"Failed to write status line to {stream_name}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
        self.stream_name = stream_name
        self.cause = cause


class StatusLineParseError(ValueError):
    """Raised when a rendered status line does not match any known template."""

    def __init__(self, line: str, kind_name: str) -> None:
        super().__init__(f"Line does not match any {kind_name} status template: {line!r}")
        self.line = line
        self.kind_name = kind_name


__all__ = ["StatusLineParseError", "WriteFailure"]
