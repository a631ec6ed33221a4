"""Destination stream selection."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Tuple

from ..status_data_models import StatusKind

STDOUT_NAME = "stdout"
STDERR_NAME = "stderr"


class StreamSelector:
    """Maps a status kind to the stream it is written to.

    Streams left as ``None`` are looked up on ``sys`` at selection time so that
    redirection after construction is honoured.
    """

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        self._stdout = stdout
        self._stderr = stderr

    def select(self, kind: StatusKind) -> Tuple[str, Optional[TextIO]]:
        """Return ``(stream name, stream)`` for ``kind``; the stream may be None."""
        if kind.uses_error_stream:
            return STDERR_NAME, self._stderr if self._stderr is not None else sys.stderr
        return STDOUT_NAME, self._stdout if self._stdout is not None else sys.stdout
