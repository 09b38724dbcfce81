"""Tests for lofi_pixel.clock: Chicago time formatting."""

from datetime import datetime, timezone

from lofi_pixel.clock import format_clock


class TestFormatClock:
    def test_winter_is_cst(self):
        # 21:04:05 UTC in January -> 3:04:05 PM CST
        now = datetime(2024, 1, 15, 21, 4, 5, tzinfo=timezone.utc)
        assert format_clock(now) == '3:04:05 PM CST'

    def test_summer_is_cdt(self):
        now = datetime(2024, 7, 4, 14, 0, 9, tzinfo=timezone.utc)
        assert format_clock(now) == '9:00:09 AM CDT'

    def test_midnight_shows_twelve(self):
        now = datetime(2024, 1, 15, 6, 0, 0, tzinfo=timezone.utc)
        assert format_clock(now) == '12:00:00 AM CST'

    def test_noon_shows_twelve_pm(self):
        now = datetime(2024, 1, 15, 18, 30, 0, tzinfo=timezone.utc)
        assert format_clock(now) == '12:30:00 PM CST'

    def test_naive_is_utc(self):
        assert format_clock(datetime(2024, 1, 15, 21, 4, 5)) == '3:04:05 PM CST'

    def test_default_now(self):
        text = format_clock()
        assert text.endswith(('CST', 'CDT'))
        assert (' AM ' in text) or (' PM ' in text)
