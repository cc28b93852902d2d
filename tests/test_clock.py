"""Tests for GameTime advancement, wraparound, and time-of-day buckets."""
from __future__ import annotations

import pytest

from tick_weather.clock import DAY_MINS, GameTime, sunlight_times
from tick_weather.types import Season, TimeCat


class TestConstruction:
    def test_minutes_since_midnight(self) -> None:
        assert GameTime(6, 0).minutes == 360
        assert GameTime(22, 30).minutes == 1350

    def test_hour_minute(self) -> None:
        assert GameTime(13, 7).hour_minute() == (13, 7)

    def test_str_zero_pads(self) -> None:
        assert str(GameTime(6, 5)) == "06:05"
        assert str(GameTime(0, 0)) == "00:00"

    def test_equality(self) -> None:
        assert GameTime(9, 0) == GameTime(9, 0)
        assert GameTime(9, 0) != GameTime(9, 1)

    @pytest.mark.parametrize(("hour", "minute"), [(24, 0), (25, 0), (-1, 0), (6, 60), (6, -1)])
    def test_rejects_out_of_range(self, hour: int, minute: int) -> None:
        with pytest.raises(ValueError):
            GameTime(hour, minute)

    def test_last_minute_of_day(self) -> None:
        assert str(GameTime(23, 59)) == "23:59"


class TestTick:
    def test_minutes_only(self) -> None:
        t = GameTime(6, 0)
        t.tick(0, 5)
        assert str(t) == "06:05"

    def test_hours_and_minutes(self) -> None:
        t = GameTime(6, 0)
        t.tick(2, 30)
        assert str(t) == "08:30"

    def test_wraps_past_midnight(self) -> None:
        t = GameTime(23, 45)
        t.tick(1, 30)
        assert str(t) == "01:15"

    def test_minute_overflow_wraps(self) -> None:
        t = GameTime(23, 0)
        t.tick(0, 90)
        assert str(t) == "00:30"

    def test_full_day_is_identity(self) -> None:
        for hour in range(24):
            for minute in (0, 1, 29, 59):
                t = GameTime(hour, minute)
                t.tick(24, 0)
                assert t == GameTime(hour, minute)

    def test_minutes_stay_in_range(self) -> None:
        t = GameTime(0, 0)
        for hours, minutes in [(0, 1), (5, 59), (23, 59), (47, 0), (0, 255), (100, 200)]:
            t.tick(hours, minutes)
            assert 0 <= t.minutes < DAY_MINS

    def test_copy_is_independent(self) -> None:
        t = GameTime(6, 0)
        clone = t.copy()
        t.tick(1, 0)
        assert clone == GameTime(6, 0)


class TestClassify:
    @pytest.mark.parametrize(
        ("hour", "minute", "expected"),
        [
            (7, 59, TimeCat.NIGHT),
            (8, 0, TimeCat.DAWN),
            (9, 7, TimeCat.DAWN),
            (9, 8, TimeCat.MORNING),
            (11, 57, TimeCat.MORNING),
            (11, 58, TimeCat.NOON),
            (12, 30, TimeCat.NOON),
            (15, 0, TimeCat.AFTERNOON),
            (15, 54, TimeCat.AFTERNOON),
            (15, 55, TimeCat.DUSK),
            (17, 0, TimeCat.DUSK),
            (17, 1, TimeCat.NIGHT),
        ],
    )
    def test_spring_buckets(self, hour: int, minute: int, expected: TimeCat) -> None:
        assert GameTime(hour, minute).classify(Season.SPRING) is expected

    def test_sunset_is_dusk_for_every_season(self) -> None:
        for season in Season:
            _, sunset = sunlight_times(season)
            assert sunset.classify(season) is TimeCat.DUSK

    def test_winter_early_morning_is_night(self) -> None:
        assert GameTime(6, 0).classify(Season.WINTER) is TimeCat.NIGHT

    def test_winter_sunrise_is_dawn(self) -> None:
        assert GameTime(9, 0).classify(Season.WINTER) is TimeCat.DAWN

    def test_winter_midday_is_noon(self) -> None:
        assert GameTime(12, 0).classify(Season.WINTER) is TimeCat.NOON

    def test_summer_late_evening_still_light(self) -> None:
        assert GameTime(22, 0).classify(Season.SUMMER) is TimeCat.DUSK
        assert GameTime(22, 31).classify(Season.SUMMER) is TimeCat.NIGHT

    def test_every_minute_classifies(self) -> None:
        for season in Season:
            t = GameTime(0, 0)
            for _ in range(DAY_MINS):
                assert isinstance(t.classify(season), TimeCat)
                t.tick(0, 1)
