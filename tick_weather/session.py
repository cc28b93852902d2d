"""Session - one play-through of clock, weather and location state."""
from __future__ import annotations

import os
import random
from typing import Callable, Protocol, Sequence, TypeVar

from tick_weather.clock import HOUR_MINS, GameTime
from tick_weather.config import SessionConfig
from tick_weather.engine import Engine
from tick_weather.location import Location
from tick_weather.narrator import describe
from tick_weather.types import Action, Coord, Direction, Season
from tick_weather.weather import WeatherState

T = TypeVar("T")

# Presents labeled options and returns the zero-based index of the pick.
Choose = Callable[[Sequence[T]], int]


class TextSink(Protocol):
    def write(self, text: str, /) -> object: ...


class Session:
    def __init__(
        self,
        out: TextSink,
        choose: Choose,
        rng: random.Random,
        config: SessionConfig,
    ) -> None:
        self._out = out
        self._choose = choose
        self._config = config
        self._location: Location = config.location
        self._coord = Coord()
        self._time = GameTime(config.start_hour, config.start_minute)
        self._season: Season = config.season
        self._engine = Engine(self._location, self._season, rng)
        self._weather = WeatherState(
            temperature=self._location.temp_base(self._season, self._time, config.sky),
            wind=config.wind,
            sky=config.sky,
        )
        self._last_desc = self.description()

    @classmethod
    def spawn(
        cls,
        out: TextSink,
        choose: Choose,
        rng: random.Random | None = None,
        config: SessionConfig | None = None,
    ) -> Session:
        if rng is None:
            rng = random.Random(int.from_bytes(os.urandom(8)))
        return cls(out, choose, rng, config or SessionConfig())

    # --- State ---

    @property
    def time(self) -> GameTime:
        return self._time

    @property
    def season(self) -> Season:
        return self._season

    @property
    def location(self) -> Location:
        return self._location

    @property
    def coord(self) -> Coord:
        return self._coord

    @property
    def weather(self) -> WeatherState:
        return self._weather

    @property
    def last_description(self) -> str:
        return self._last_desc

    def description(self) -> str:
        return describe(self._location, self._season, self._time, self._weather)

    def available_actions(self) -> list[Action]:
        return [Action.DESCRIBE, Action.GO, Action.WAIT, Action.QUIT]

    def available_directions(self) -> list[Direction]:
        return [Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST]

    # --- Actions ---

    def act(self, action: Action) -> bool:
        """Apply ``action``. Returns True when the session should end."""
        if action is Action.QUIT:
            return True

        if action is Action.DESCRIBE:
            self._describe()
            return False

        if action is Action.GO:
            directions = self.available_directions()
            self._writeln("which direction?")
            direction = directions[self._choose(directions)]
            self._coord = self._coord + direction.as_coord(self._config.step_magnitude)
            self._writeln(f"you head {direction}.")
            self._advance(self._config.go_minutes)
        elif action is Action.WAIT:
            self._writeln("some time passes.")
            self._advance(self._config.wait_minutes)

        if self.description() != self._last_desc:
            self._writeln("your surroundings look different.")
            self._writeln()
            self._describe()
        return False

    def _describe(self) -> None:
        description = self.description()
        self._out.write(description)
        self._last_desc = description

    def _advance(self, minutes: int) -> None:
        hours, mins = divmod(minutes, HOUR_MINS)
        self._time.tick(hours, mins)
        self._engine.run(self._weather, self._time, minutes, self._writeln)

    def _writeln(self, line: str = "") -> None:
        self._out.write(f"{line}\n")
