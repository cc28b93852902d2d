"""Per-minute weather systems.

Each factory returns a system ``(WeatherState, TickContext) -> None`` that
the engine calls once per simulated minute. Rolls are uniform integers in
``[0, CHANCE_SCALE]`` compared against a location chance.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_weather.location import CHANCE_SCALE
from tick_weather.narrator import sky_change_line
from tick_weather.types import System, saturating_add

if TYPE_CHECKING:
    import random

    from tick_weather.types import TickContext
    from tick_weather.weather import WeatherState


def roll(rng: random.Random, chance: int) -> bool:
    return rng.randint(0, CHANCE_SCALE) < chance


def make_temperature_system() -> System:
    """Propose a new temperature relative to the committed one.

    The proposal goes to ``pending_temperature``; a later minute of the same
    advance replaces it rather than adding to it.
    """

    def temperature_system(weather: WeatherState, ctx: TickContext) -> None:
        loc, season, time = ctx.location, ctx.season, ctx.time
        if not roll(ctx.random, loc.chance_temp_change):
            return

        delta = ctx.random.randint(1, loc.temp_max_change(season, time, weather.sky))
        toward_base = roll(ctx.random, loc.chance_temp_toward_base)

        base = loc.temp_base(season, time, weather.sky)
        if weather.temperature < base:
            if not toward_base:
                delta = -delta
        elif weather.temperature > base:
            if toward_base:
                delta = -delta
        elif ctx.random.random() < 0.5:
            delta = -delta

        weather.pending_temperature = saturating_add(weather.temperature, delta)

    return temperature_system


def make_wind_system() -> System:
    def wind_system(weather: WeatherState, ctx: TickContext) -> None:
        loc = ctx.location
        if not roll(ctx.random, loc.chance_wind_change):
            return
        if roll(ctx.random, loc.chance_wind_increase):
            if weather.increase_wind():
                ctx.narrate("the wind speeds up.")
        elif weather.decrease_wind():
            ctx.narrate("the wind slows down.")

    return wind_system


def make_sky_system() -> System:
    """Roll every entry of the location's sky table in order.

    Entries are independent; when several succeed in one minute each one is
    narrated and the last one decides the sky.
    """

    def sky_system(weather: WeatherState, ctx: TickContext) -> None:
        for chance, target in ctx.location.chances_sky:
            if not roll(ctx.random, chance):
                continue
            line = sky_change_line(weather.sky, target, weather.freezing)
            if line is not None:
                ctx.narrate(line)
            weather.sky = target

    return sky_system


def default_systems() -> list[System]:
    """Systems in draw order: temperature, wind, sky."""
    return [make_temperature_system(), make_wind_system(), make_sky_system()]
