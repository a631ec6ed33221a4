"""Output stream writer for status lines."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from ..errors import WriteFailure
from ..status_data_models import WriteResult

logger = logging.getLogger(__name__)


class OutputWriter:
    """Writes one rendered line to a stream and reports the outcome."""

    def __init__(self, flush: bool = True):
        """
        Initialize the output writer.

        Args:
            flush: Whether to flush the stream after every line
        """
        self.flush = flush

    def write(self, line: str, stream: Optional[TextIO], stream_name: str) -> WriteResult:
        """Write ``line`` with a single ``write`` call; never raises on stream errors."""
        if stream is None:
            failure = WriteFailure(stream_name)
            logger.debug("Status line dropped: %s is not available", stream_name)
            return WriteResult.failed(failure)

        try:
            written = stream.write(line)
            if self.flush:
                stream.flush()
        except (OSError, ValueError) as exc:  # policy_guard: allow-silent-handler
            # Closed or broken streams; the caller decides whether a lost line matters
            logger.debug("Status line write to %s failed: %s", stream_name, exc)
            return WriteResult.failed(WriteFailure(stream_name, exc))

        if not isinstance(written, int) or isinstance(written, bool):
            written = len(line)
        return WriteResult.success(written)
