"""GameTime - minute-of-day clock with wraparound and time-of-day buckets."""
from __future__ import annotations

from tick_weather.types import Season, TimeCat

HOUR_MINS = 60
DAY_HOURS = 24
DAY_MINS = HOUR_MINS * DAY_HOURS

# Upper bound of each daylight bucket on the 0..255 sunrise-to-sunset scale.
_DAYLIGHT_BUCKETS = (
    (31, TimeCat.DAWN),
    (111, TimeCat.MORNING),
    (143, TimeCat.NOON),
    (223, TimeCat.AFTERNOON),
    (255, TimeCat.DUSK),
)


class GameTime:
    def __init__(self, hour: int = 0, minute: int = 0) -> None:
        if not 0 <= hour < DAY_HOURS:
            raise ValueError(f"hour must be in [0, {DAY_HOURS}), got {hour}")
        if not 0 <= minute < HOUR_MINS:
            raise ValueError(f"minute must be in [0, {HOUR_MINS}), got {minute}")
        self._mins = hour * HOUR_MINS + minute

    @property
    def minutes(self) -> int:
        return self._mins

    def hour_minute(self) -> tuple[int, int]:
        return divmod(self._mins, HOUR_MINS)

    def tick(self, hours: int, minutes: int) -> None:
        """Advance by ``hours`` and ``minutes``.

        Each hour is added and wrapped on its own before the minute
        remainder is added and wrapped.
        """
        for _ in range(hours):
            self._mins = (self._mins + HOUR_MINS) % DAY_MINS
        self._mins = (self._mins + minutes) % DAY_MINS

    def classify(self, season: Season) -> TimeCat:
        sunrise, sunset = sunlight_times(season)
        if self._mins < sunrise.minutes or self._mins > sunset.minutes:
            return TimeCat.NIGHT

        # 0 is sunrise, 255 is sunset
        stretch = int(
            (self._mins - sunrise.minutes) / (sunset.minutes - sunrise.minutes) * 255
        )
        for upper, cat in _DAYLIGHT_BUCKETS:
            if stretch <= upper:
                return cat
        return TimeCat.DUSK

    def copy(self) -> GameTime:
        return GameTime(*self.hour_minute())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameTime):
            return NotImplemented
        return self._mins == other._mins

    def __hash__(self) -> int:
        return hash(self._mins)

    def __repr__(self) -> str:
        return f"GameTime({self})"

    def __str__(self) -> str:
        hour, minute = self.hour_minute()
        return f"{hour:02d}:{minute:02d}"


_SUNLIGHT_TIMES: dict[Season, tuple[GameTime, GameTime]] = {
    Season.SPRING: (GameTime(8, 0), GameTime(17, 0)),
    Season.SUMMER: (GameTime(4, 0), GameTime(22, 30)),
    Season.AUTUMN: (GameTime(5, 0), GameTime(21, 30)),
    Season.WINTER: (GameTime(9, 0), GameTime(15, 0)),
}


def sunlight_times(season: Season) -> tuple[GameTime, GameTime]:
    """Return ``(sunrise, sunset)`` for the season."""
    sunrise, sunset = _SUNLIGHT_TIMES[season]
    return sunrise.copy(), sunset.copy()
