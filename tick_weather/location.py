"""Per-location climate tables.

Locations form a closed set. A new place is a new ``Location`` member plus
one entry in each table below; every lookup stays total over the members.
Chances are integers out of ``CHANCE_SCALE`` and are evaluated once per
simulated minute.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tick_weather.clock import GameTime
from tick_weather.solar import SUN_INTENSITY, sunlight_level
from tick_weather.types import Season, Sky

CHANCE_SCALE = 100_000

DIURNAL_VAR = 10.0
MAX_CHANGE = 4.0

SKY_ATTENUATION: dict[Sky, float] = {
    Sky.CLEAR: 1.0,
    Sky.CLOUDS: 0.7,
    Sky.RAIN: 0.6,
}


@dataclass(frozen=True)
class ClimateTable:
    """Constant climate parameters of one location."""

    name: str
    base_temp: dict[Season, int]
    sky_visibility: dict[Season, float]
    chance_temp_change: int
    chance_temp_toward_base: int
    chance_wind_change: int
    chance_wind_increase: int
    chances_sky: tuple[tuple[int, Sky], tuple[int, Sky], tuple[int, Sky]]


_FOREST = ClimateTable(
    name="forest",
    base_temp={
        Season.SPRING: 0,
        Season.SUMMER: 6,
        Season.AUTUMN: 9,
        Season.WINTER: -5,
    },
    sky_visibility={
        Season.SPRING: 0.8,
        Season.SUMMER: 0.6,
        Season.AUTUMN: 0.7,
        Season.WINTER: 0.9,
    },
    chance_temp_change=16_667,  # 1 change / 10 mins
    chance_temp_toward_base=60_000,
    chance_wind_change=1_667,  # 1 change / 1 hr
    chance_wind_increase=50_000,
    chances_sky=(
        (208, Sky.CLEAR),  # 1 change / 8 hrs
        (417, Sky.CLOUDS),  # 1 change / 4 hrs
        (139, Sky.RAIN),  # 1 change / 12 hrs
    ),
)


class Location(Enum):
    FOREST = "forest"

    @property
    def climate(self) -> ClimateTable:
        return _CLIMATES[self]

    def sunlight(self, season: Season, time: GameTime, sky: Sky) -> float:
        """Sunlight reaching the ground, in ``[0, 1]``."""
        visibility = self.climate.sky_visibility[season] * SKY_ATTENUATION[sky]
        return sunlight_level(season, time) * SUN_INTENSITY[season] * visibility

    def temp_base(self, season: Season, time: GameTime, sky: Sky) -> int:
        """Temperature the location drifts toward at this moment."""
        sun_bias = (self.sunlight(season, time, sky) - 0.5) * DIURNAL_VAR * 2.0
        return self.climate.base_temp[season] + int(sun_bias)

    def temp_max_change(self, season: Season, time: GameTime, sky: Sky) -> int:
        """Largest temperature step of a single event. Always positive."""
        return int(self.sunlight(season, time, sky) * MAX_CHANGE) + 1

    @property
    def chance_temp_change(self) -> int:
        return self.climate.chance_temp_change

    @property
    def chance_temp_toward_base(self) -> int:
        return self.climate.chance_temp_toward_base

    @property
    def chance_wind_change(self) -> int:
        return self.climate.chance_wind_change

    @property
    def chance_wind_increase(self) -> int:
        return self.climate.chance_wind_increase

    @property
    def chances_sky(self) -> tuple[tuple[int, Sky], ...]:
        return self.climate.chances_sky


_CLIMATES: dict[Location, ClimateTable] = {
    Location.FOREST: _FOREST,
}
