"""
Data structures for status reporting.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from .errors import WriteFailure

WRITE_FAILURE = -1


class StatusKind(IntEnum):
    """Severity of a status message"""

    EXECUTION = 0
    ERROR = 1
    WARNING = 2

    @property
    def label(self) -> str:
        """Label token printed before the message; empty for execution messages."""
        if self is StatusKind.EXECUTION:
            return ""
        return self.name

    @property
    def uses_error_stream(self) -> bool:
        return self is not StatusKind.EXECUTION

    @classmethod
    def coerce(cls, value: Union["StatusKind", int, str]) -> "StatusKind":
        """Resolve a member, its integer value or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError as exc:
                raise ValueError(f"Unknown status kind {value!r}") from exc
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as exc:
                raise ValueError(f"Unknown status kind {value!r}") from exc
        raise ValueError(f"Unknown status kind {value!r}")


@dataclass(frozen=True)
class StatusMessage:
    """One status report, built immediately before formatting and then discarded."""

    kind: StatusKind
    text: str
    caller: Optional[str] = None
    app_name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.text is None:
            raise TypeError("Status message text must not be None")

    @property
    def has_caller(self) -> bool:
        return self.caller is not None

    @property
    def has_app_name(self) -> bool:
        return self.app_name is not None


@dataclass(frozen=True)
class WriteResult:
    """Outcome of writing one status line."""

    chars_written: int
    failure: Optional[WriteFailure] = None

    @classmethod
    def success(cls, chars_written: int) -> "WriteResult":
        return cls(chars_written=chars_written)

    @classmethod
    def failed(cls, failure: WriteFailure) -> "WriteResult":
        return cls(chars_written=WRITE_FAILURE, failure=failure)

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def status_code(self) -> int:
        """Characters written on success, ``WRITE_FAILURE`` otherwise."""
        if self.failure is not None:
            return WRITE_FAILURE
        return self.chars_written


__all__ = [
    "WRITE_FAILURE",
    "StatusKind",
    "StatusMessage",
    "WriteResult",
]
