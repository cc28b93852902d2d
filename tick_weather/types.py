"""Shared enums, coordinates, and saturating arithmetic."""
from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Callable

# Signed 8-bit bounds shared by temperature and coordinate axes.
I8_MIN = -128
I8_MAX = 127


def saturating_add(value: int, delta: int, lo: int = I8_MIN, hi: int = I8_MAX) -> int:
    """Add ``delta`` to ``value``, clamping the result to ``[lo, hi]``."""
    return max(lo, min(hi, value + delta))


class Season(Enum):
    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"


class Sky(Enum):
    """Sky condition. RAIN reads as snow below zero."""

    CLEAR = "clear"
    CLOUDS = "clouds"
    RAIN = "rain"


class Wind(IntEnum):
    """Ordered wind strength."""

    NONE = 0
    LIGHT = 1
    MEDIUM = 2
    HIGH = 3

    def stronger(self) -> Wind:
        return Wind(min(self + 1, Wind.HIGH))

    def weaker(self) -> Wind:
        return Wind(max(self - 1, Wind.NONE))


class TempCat(Enum):
    """Temperature bucket, valued by its narration adjective."""

    FREEZING = "frigid"
    CHILLY = "chilly"
    NEUTRAL = "light"
    WARM = "warm"
    HOT = "hot"

    @classmethod
    def classify(cls, temp: int) -> TempCat:
        if temp <= 0:
            return cls.FREEZING
        if temp <= 19:
            return cls.CHILLY
        if temp <= 25:
            return cls.NEUTRAL
        if temp <= 31:
            return cls.WARM
        return cls.HOT

    def __str__(self) -> str:
        return self.value


class TimeCat(Enum):
    DAWN = "dawn"
    MORNING = "morning"
    NOON = "noon"
    AFTERNOON = "afternoon"
    DUSK = "dusk"
    NIGHT = "night"


@dataclass(frozen=True)
class Coord:
    """North/west offset within a location. Addition saturates per axis."""

    n: int = 0
    w: int = 0

    def __add__(self, other: Coord) -> Coord:
        return Coord(
            n=saturating_add(self.n, other.n),
            w=saturating_add(self.w, other.w),
        )


class Action(Enum):
    DESCRIBE = "describe"
    GO = "go"
    WAIT = "wait"
    QUIT = "quit"

    def __str__(self) -> str:
        return self.value


class Direction(Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    def as_coord(self, magnitude: int = 1) -> Coord:
        if self is Direction.NORTH:
            return Coord(n=magnitude)
        if self is Direction.SOUTH:
            return Coord(n=-magnitude)
        if self is Direction.EAST:
            return Coord(w=-magnitude)
        return Coord(w=magnitude)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class TickContext:
    """Read-only view handed to each system for one simulated minute."""

    minute: int
    time: GameTime
    season: Season
    location: Location
    random: _random.Random
    narrate: Callable[[str], None]


if TYPE_CHECKING:
    from tick_weather.clock import GameTime
    from tick_weather.location import Location
    from tick_weather.weather import WeatherState

System = Callable[["WeatherState", TickContext], None]
