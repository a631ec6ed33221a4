"""Clock access and timestamp rendering."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

import pytz

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

Clock = Callable[[], datetime]


class TimestampFormatter:
    """Reads the clock once per call and renders ``YYYY-MM-DD HH:MM:SS``."""

    def __init__(self, clock: Optional[Clock] = None, timezone_name: Optional[str] = None):
        """
        Args:
            clock: Callable returning the current datetime (default: local wall clock)
            timezone_name: pytz zone to render in instead of local time
        """
        self._clock = clock
        self._tz = pytz.timezone(timezone_name) if timezone_name else None

    def now(self) -> datetime:
        if self._clock is None:
            return datetime.now(self._tz) if self._tz is not None else datetime.now()

        current = self._clock()
        if self._tz is not None and current.tzinfo is not None:
            return current.astimezone(self._tz)
        return current

    def current_timestamp(self) -> str:
        return self.now().strftime(TIMESTAMP_FORMAT)
