from datetime import datetime, timedelta
from unittest.mock import patch

from app.core import timestamps


class TestNextTimestamp:

    def test_without_previous_returns_now(self):
        fixed = datetime(2024, 1, 1, 12, 0, 0)
        with patch.object(timestamps, "utcnow", return_value=fixed):
            assert timestamps.next_timestamp() == fixed

    def test_advances_past_equal_clock(self):
        fixed = datetime(2024, 1, 1, 12, 0, 0)
        with patch.object(timestamps, "utcnow", return_value=fixed):
            assert timestamps.next_timestamp(fixed) == fixed + timedelta(microseconds=1)

    def test_advances_past_clock_running_behind(self):
        previous = datetime(2024, 1, 1, 12, 0, 5)
        with patch.object(timestamps, "utcnow", return_value=datetime(2024, 1, 1, 12, 0, 0)):
            assert timestamps.next_timestamp(previous) == previous + timedelta(microseconds=1)

    def test_uses_clock_when_it_is_ahead(self):
        previous = datetime(2024, 1, 1, 12, 0, 0)
        later = datetime(2024, 1, 1, 12, 0, 1)
        with patch.object(timestamps, "utcnow", return_value=later):
            assert timestamps.next_timestamp(previous) == later

    def test_utcnow_is_naive(self):
        assert timestamps.utcnow().tzinfo is None
