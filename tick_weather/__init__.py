"""tick-weather - A minute-by-minute weather and narration engine."""

from tick_weather.clock import GameTime
from tick_weather.config import ConfigError, SessionConfig
from tick_weather.engine import Engine
from tick_weather.location import Location
from tick_weather.narrator import describe, sky_change_line
from tick_weather.session import Session
from tick_weather.types import (
    Action,
    Coord,
    Direction,
    Season,
    Sky,
    TempCat,
    TickContext,
    TimeCat,
    Wind,
)
from tick_weather.weather import WeatherState

__all__ = [
    "Session",
    "SessionConfig",
    "ConfigError",
    "Engine",
    "GameTime",
    "Location",
    "WeatherState",
    "TickContext",
    "Action",
    "Direction",
    "Coord",
    "Season",
    "Sky",
    "Wind",
    "TempCat",
    "TimeCat",
    "describe",
    "sky_change_line",
]
