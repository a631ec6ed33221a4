"""Recover the fields of a rendered status line."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Union

from ..errors import StatusLineParseError
from ..status_data_models import StatusKind

_TIMESTAMP = r"(?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})> "
_APP = r"(?P<app_name>.*?): "
_CALLER = r"in '(?P<caller>.*?)': "
_TEXT = r"(?P<text>.*)"


@dataclass(frozen=True)
class ParsedStatusLine:
    """Fields recovered from one status line."""

    timestamp: str
    app_name: Optional[str]
    label: str
    caller: Optional[str]
    text: str


def _patterns_for(kind: StatusKind) -> List[Pattern[str]]:
    # Most specific template first; app names match as short as possible
    if kind.label:
        label = re.escape(kind.label)
        sources = [
            _TIMESTAMP + _APP + label + " " + _CALLER + _TEXT,
            _TIMESTAMP + label + " " + _CALLER + _TEXT,
            _TIMESTAMP + _APP + label + ": " + _TEXT,
            _TIMESTAMP + label + ": " + _TEXT,
        ]
    else:
        sources = [
            _TIMESTAMP + _APP + _CALLER + _TEXT,
            _TIMESTAMP + _CALLER + _TEXT,
            _TIMESTAMP + _APP + _TEXT,
            _TIMESTAMP + _TEXT,
        ]
    return [re.compile(source, re.DOTALL) for source in sources]


_PATTERNS = {kind: _patterns_for(kind) for kind in StatusKind}


def parse_status_line(line: str, kind: Union[StatusKind, int, str]) -> ParsedStatusLine:
    """
    Parse a line produced by the status reporter for a known kind.

    Free text that itself contains ``": "`` or ``" in '"`` can match more than
    one template; the template with the most fields wins. Such lines do not
    round-trip: an execution line rendered without an app name and with the
    text ``"note: details"`` parses back as app name ``"note"`` and text
    ``"details"``. The same loss applies to a caller-less line whose text
    contains ``"in '...': "``. Only lines whose app name, caller and text are
    free of these tokens are recovered exactly.

    Raises:
        StatusLineParseError: If the line matches none of the kind's templates
    """
    resolved = StatusKind.coerce(kind)
    body = line[:-1] if line.endswith("\n") else line

    for pattern in _PATTERNS[resolved]:
        match = pattern.fullmatch(body)
        if match is None:
            continue
        fields = match.groupdict()
        return ParsedStatusLine(
            timestamp=fields["timestamp"],
            app_name=fields.get("app_name"),
            label=resolved.label,
            caller=fields.get("caller"),
            text=fields["text"],
        )

    raise StatusLineParseError(line, resolved.name)
