"""Tests for zone resolution, formatting helpers and the zone catalog."""

from datetime import datetime, timedelta, timezone

import pytest
import pytz

from atlas_clock.core import zones
from atlas_clock.core.time_source import TimeSource
from atlas_clock.error_handling import InvalidTimezoneError
from atlas_clock.utils.time_utils import (
    format_clock_time,
    format_long_date,
    format_short_date,
    format_utc_offset,
    format_zone_caption,
)

from conftest import FIXED_NOW


class TestTimeSource:
    def test_utc_entry_has_zero_offset(self, time_source):
        now = time_source.now_in("UTC")

        assert now == FIXED_NOW
        assert format_utc_offset(now.utcoffset()) == "+00:00"
        assert format_zone_caption(now) == "UTC (UTC+00:00)"

    def test_named_zone(self, time_source):
        now = time_source.now_in("Asia/Tokyo")

        assert now.hour == 9
        assert format_utc_offset(now.utcoffset()) == "+09:00"
        assert now.tzname() == "JST"

    def test_negative_offset(self, time_source):
        now = time_source.now_in("America/New_York")

        assert (now.year, now.month, now.day, now.hour) == (2023, 12, 31, 19)
        assert format_utc_offset(now.utcoffset()) == "-05:00"

    def test_local_uses_system_zone(self, time_source):
        assert time_source.now_in("Local") == FIXED_NOW.astimezone()
        assert time_source.now_in("") == FIXED_NOW.astimezone()

    def test_unknown_zone_falls_back_to_local(self, time_source):
        now = time_source.now_in("Nowhere/Fake")

        assert now == FIXED_NOW
        assert now.utcoffset() == FIXED_NOW.astimezone().utcoffset()

    def test_resolve_is_strict(self, time_source):
        with pytest.raises(InvalidTimezoneError) as exc_info:
            time_source.resolve("Nowhere/Fake")

        assert exc_info.value.zone == "Nowhere/Fake"
        assert "Nowhere/Fake" in str(exc_info.value)

    def test_resolve_sentinels(self, time_source):
        assert time_source.resolve("UTC") is pytz.UTC
        assert time_source.resolve("Local") is not None

    def test_canonical_name(self, time_source):
        assert time_source.canonical_name("asia/tokyo") == "Asia/Tokyo"
        assert time_source.canonical_name("Local") == "Local"
        with pytest.raises(InvalidTimezoneError):
            time_source.canonical_name("Atlantis")

    def test_default_clock_is_aware(self):
        assert TimeSource().now().tzinfo is not None

    def test_zone_times_follow_overridden_now(self, time_source, monkeypatch):
        later = FIXED_NOW + timedelta(hours=3)
        monkeypatch.setattr(time_source, "now", lambda: later)

        assert time_source.now_in("UTC") == later
        assert time_source.now_in("Asia/Tokyo").hour == 12
        assert time_source.now_in("Local") == later


class TestFormatting:
    @pytest.mark.parametrize(
        "offset, expected",
        [
            (None, "+00:00"),
            (timedelta(0), "+00:00"),
            (timedelta(hours=5, minutes=30), "+05:30"),
            (timedelta(hours=-3, minutes=-30), "-03:30"),
            (timedelta(hours=14), "+14:00"),
            (timedelta(hours=-12), "-12:00"),
        ],
    )
    def test_format_utc_offset(self, offset, expected):
        assert format_utc_offset(offset) == expected

    def test_format_clock_time(self):
        dt = datetime(2024, 3, 9, 7, 5, 3, 456789)
        assert format_clock_time(dt) == "07:05:03"
        assert format_clock_time(dt, with_fraction=True) == "07:05:03.45"

    def test_dates(self):
        dt = datetime(2006, 1, 2, 15, 4, 5)
        assert format_short_date(dt) == "Mon, Jan 02"
        assert format_long_date(dt) == "Monday, January 02, 2006"

    def test_caption_without_tzname(self):
        dt = datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=2)))
        assert format_zone_caption(dt).endswith("(UTC+02:00)")


class TestZoneCatalog:
    def test_sentinels_first(self):
        assert zones.ZONE_CATALOG[:2] == ("Local", "UTC")
        assert zones.ZONE_CATALOG.count("UTC") == 1

    def test_prefix_matches_first(self):
        assert zones.suggest("europe/l")[:2] == ["Europe/Lisbon", "Europe/Ljubljana"]

    def test_substring_match(self):
        assert "Asia/Tokyo" in zones.suggest("tokyo")

    def test_limit_and_blank(self):
        assert len(zones.suggest("a", limit=3)) == 3
        assert zones.suggest("   ") == []
        assert zones.suggest("zzzz") == []
