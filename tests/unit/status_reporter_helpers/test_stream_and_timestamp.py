import io
import sys
from datetime import datetime

import pytest
import pytz

from status_reporting.status_data_models import StatusKind
from status_reporting.status_reporter_helpers import StreamSelector, TimestampFormatter


class TestStreamSelector:
    def test_injected_streams(self):
        out, err = io.StringIO(), io.StringIO()
        selector = StreamSelector(out, err)

        assert selector.select(StatusKind.EXECUTION) == ("stdout", out)
        assert selector.select(StatusKind.ERROR) == ("stderr", err)
        assert selector.select(StatusKind.WARNING) == ("stderr", err)

    def test_defaults_follow_sys_streams_at_call_time(self, monkeypatch):
        selector = StreamSelector()
        replacement = io.StringIO()
        monkeypatch.setattr(sys, "stderr", replacement)

        assert selector.select(StatusKind.WARNING) == ("stderr", replacement)
        assert selector.select(StatusKind.EXECUTION)[1] is sys.stdout


class TestTimestampFormatter:
    def test_zero_padded_24_hour(self):
        formatter = TimestampFormatter(clock=lambda: datetime(2024, 3, 5, 7, 8, 9))
        assert formatter.current_timestamp() == "2024-03-05 07:08:09"

    def test_afternoon_uses_24_hour_clock(self):
        formatter = TimestampFormatter(clock=lambda: datetime(2024, 3, 5, 19, 0, 0))
        assert formatter.current_timestamp() == "2024-03-05 19:00:00"

    def test_clock_read_once_per_timestamp(self):
        calls = []

        def clock():
            calls.append(1)
            return datetime(2024, 1, 1)

        TimestampFormatter(clock=clock).current_timestamp()
        assert len(calls) == 1

    def test_naive_clock_not_shifted_by_timezone(self):
        formatter = TimestampFormatter(clock=lambda: datetime(2024, 1, 1, 12, 0, 0), timezone_name="Asia/Tokyo")
        assert formatter.current_timestamp() == "2024-01-01 12:00:00"

    def test_configured_timezone_for_real_clock(self):
        formatter = TimestampFormatter(timezone_name="UTC")
        now = formatter.now()
        assert now.tzinfo is not None
        assert now.utcoffset().total_seconds() == 0

    def test_unknown_timezone(self):
        with pytest.raises(pytz.UnknownTimeZoneError):
            TimestampFormatter(timezone_name="Mars/Olympus")
