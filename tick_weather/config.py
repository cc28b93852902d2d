"""Session configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from tick_weather.clock import DAY_HOURS, HOUR_MINS
from tick_weather.location import Location
from tick_weather.types import I8_MAX, Season, Sky, Wind


class ConfigError(ValueError):
    """Raised when a SessionConfig field is out of range."""


@dataclass(frozen=True)
class SessionConfig:
    """Immutable starting conditions for a session.

    Attributes:
        start_hour: Hour of day the session starts at.
        start_minute: Minute past ``start_hour``.
        season: Season for the whole session.
        sky: Initial sky condition.
        wind: Initial wind level.
        location: Where the player starts.
        step_magnitude: Coordinate distance covered by one Go action.
        go_minutes: Simulated minutes a Go action takes.
        wait_minutes: Simulated minutes a Wait action takes.
    """

    start_hour: int = 6
    start_minute: int = 0
    season: Season = Season.WINTER
    sky: Sky = Sky.RAIN
    wind: Wind = Wind.HIGH
    location: Location = Location.FOREST
    step_magnitude: int = 1
    go_minutes: int = 1
    wait_minutes: int = 5

    def __post_init__(self) -> None:
        if not 0 <= self.start_hour < DAY_HOURS:
            raise ConfigError(f"start_hour must be in [0, {DAY_HOURS}), got {self.start_hour}")
        if not 0 <= self.start_minute < HOUR_MINS:
            raise ConfigError(
                f"start_minute must be in [0, {HOUR_MINS}), got {self.start_minute}"
            )
        if not 0 < self.step_magnitude <= I8_MAX:
            raise ConfigError(
                f"step_magnitude must be in (0, {I8_MAX}], got {self.step_magnitude}"
            )
        if self.go_minutes < 0:
            raise ConfigError(f"go_minutes must be non-negative, got {self.go_minutes}")
        if self.wait_minutes < 0:
            raise ConfigError(f"wait_minutes must be non-negative, got {self.wait_minutes}")


def parse_time(text: str) -> tuple[int, int]:
    """Parse ``"HH:MM"`` into ``(hour, minute)``."""
    hour_text, sep, minute_text = text.partition(":")
    if not sep:
        raise ConfigError(f"expected HH:MM, got {text!r}")
    try:
        hour, minute = int(hour_text), int(minute_text)
    except ValueError:
        raise ConfigError(f"expected HH:MM, got {text!r}") from None
    if not (0 <= hour < DAY_HOURS and 0 <= minute < HOUR_MINS):
        raise ConfigError(f"time out of range: {text!r}")
    return hour, minute
