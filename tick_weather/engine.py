"""Engine - runs the weather systems once per simulated minute."""
from __future__ import annotations

import logging
import random
from typing import Callable

from tick_weather.clock import GameTime
from tick_weather.location import Location
from tick_weather.systems import default_systems
from tick_weather.types import Season, System, TickContext
from tick_weather.weather import WeatherState

logger = logging.getLogger(__name__)


class Engine:
    def __init__(
        self,
        location: Location,
        season: Season,
        rng: random.Random,
        systems: list[System] | None = None,
    ) -> None:
        self._location = location
        self._season = season
        self._rng = rng
        self._systems: list[System] = default_systems() if systems is None else list(systems)

    @property
    def location(self) -> Location:
        return self._location

    @property
    def season(self) -> Season:
        return self._season

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def run(
        self,
        weather: WeatherState,
        time: GameTime,
        minutes: int,
        narrate: Callable[[str], None],
    ) -> None:
        """Simulate ``minutes`` minutes at ``time``, then commit the temperature.

        ``time`` is the clock after it has been advanced; every minute of the
        run sees the same time.
        """
        logger.debug(
            "advance %d min at %s: %dC (base %dC)",
            minutes,
            time,
            weather.temperature,
            self._location.temp_base(self._season, time, weather.sky),
        )

        weather.pending_temperature = weather.temperature
        for minute in range(minutes):
            ctx = TickContext(
                minute=minute,
                time=time,
                season=self._season,
                location=self._location,
                random=self._rng,
                narrate=narrate,
            )
            for system in self._systems:
                system(weather, ctx)

        new_temp = weather.pending_temperature
        weather.pending_temperature = None
        if new_temp < weather.temperature:
            narrate("it feels colder.")
        elif new_temp > weather.temperature:
            narrate("it feels warmer.")
        if new_temp != weather.temperature:
            logger.debug("temperature %dC -> %dC", weather.temperature, new_temp)
        weather.temperature = new_temp
