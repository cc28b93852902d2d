"""Seasonal sun strength and the half-sine sunlight curve."""
from __future__ import annotations

import math

from tick_weather.clock import GameTime, sunlight_times
from tick_weather.types import Season

__all__ = ["SUN_INTENSITY", "sunlight_level", "sunlight_times"]

# Relative strength of the sun at its peak, per season.
SUN_INTENSITY: dict[Season, float] = {
    Season.SPRING: 0.80,
    Season.SUMMER: 1.00,
    Season.AUTUMN: 0.90,
    Season.WINTER: 0.70,
}


def sunlight_level(season: Season, time: GameTime) -> float:
    """Sun height in ``[0, 1]``: zero from sunset to sunrise, peaking at solar noon."""
    sunrise, sunset = sunlight_times(season)
    # sunset itself is dark; sin(pi) is not exactly zero
    if time.minutes < sunrise.minutes or time.minutes >= sunset.minutes:
        return 0.0
    elapsed = time.minutes - sunrise.minutes
    interval = sunset.minutes - sunrise.minutes
    return math.sin(math.pi * elapsed / interval)
