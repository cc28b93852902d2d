"""Mutable weather state advanced by the engine."""
from __future__ import annotations

from dataclasses import dataclass

from tick_weather.types import Sky, Wind


@dataclass
class WeatherState:
    """Temperature (Celsius), wind level and sky condition.

    ``pending_temperature`` holds the temperature an in-progress advance
    will commit; it is ``None`` between advances.
    """

    temperature: int
    wind: Wind
    sky: Sky
    pending_temperature: int | None = None

    def increase_wind(self) -> bool:
        """Step the wind up one level. Returns False if already at the top."""
        old = self.wind
        self.wind = old.stronger()
        return self.wind != old

    def decrease_wind(self) -> bool:
        """Step the wind down one level. Returns False if already calm."""
        old = self.wind
        self.wind = old.weaker()
        return self.wind != old

    @property
    def freezing(self) -> bool:
        return self.temperature < 0
