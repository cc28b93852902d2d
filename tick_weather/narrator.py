"""Narration tables that turn weather state into prose.

Every table here is total over its key space: each combination of wind,
sky and temperature bucket yields exactly one sentence, as does each
combination of time bucket and sky.
"""
from __future__ import annotations

from tick_weather.clock import GameTime
from tick_weather.location import Location
from tick_weather.types import Season, Sky, TempCat, TimeCat, Wind
from tick_weather.weather import WeatherState

_LOCATION_LINES: dict[Location, str] = {
    Location.FOREST: "you are in a forest.",
}

_MILD = (TempCat.CHILLY, TempCat.NEUTRAL, TempCat.WARM)


def location_line(location: Location) -> str:
    return _LOCATION_LINES[location]


def air_line(wind: Wind, sky: Sky, temp: TempCat) -> str:
    """Sentence for the wind, sky and temperature combination."""
    if sky is Sky.RAIN:
        return _rain_line(wind, temp)

    # clear or cloudy
    if wind is Wind.NONE:
        if temp in (TempCat.FREEZING, TempCat.CHILLY):
            return f"it is {temp}."
        if temp is TempCat.NEUTRAL:
            return "the air is still."
        return f"the air is {temp} and still."
    if wind is Wind.LIGHT:
        return f"there is a {temp} breeze."
    if wind is Wind.MEDIUM:
        if temp is TempCat.FREEZING:
            return "there is a bitter wind."
        return f"there is a {temp} wind."
    if temp is TempCat.FREEZING:
        return "the wind howls and bites."
    if temp in (TempCat.CHILLY, TempCat.NEUTRAL):
        return "the wind howls."
    return f"there are strong gusts of {temp} wind."


def _rain_line(wind: Wind, temp: TempCat) -> str:
    if wind in (Wind.NONE, Wind.LIGHT) and temp in _MILD:
        return "it is raining."
    if wind is Wind.NONE:
        if temp is TempCat.FREEZING:
            return "it is snowing."
        return "it is hot and rainy."
    if wind is Wind.LIGHT:
        if temp is TempCat.FREEZING:
            return "it is snowing with a frigid breeze."
        return "it is raining with a hot breeze."
    if wind is Wind.MEDIUM:
        if temp is TempCat.FREEZING:
            return "it is snowing with a bitter wind."
        if temp in _MILD:
            return "it is raining and windy."
        return "there are hot gusts of rain."
    if temp is TempCat.FREEZING:
        return "the wind howls and bites. it is snowing furiously."
    if temp in _MILD:
        return "it is raining furiously."
    return "the hot rain blows furiously."


def time_line(time_cat: TimeCat, sky: Sky) -> str:
    """Sentence for the time of day. Only a clear sky shows the sun."""
    if time_cat is TimeCat.NIGHT:
        return "it is dark."
    if time_cat in (TimeCat.DAWN, TimeCat.DUSK):
        if sky is not Sky.CLEAR:
            return "the sky is dark grey."
        if time_cat is TimeCat.DAWN:
            return "the sun is rising."
        return "the sun is setting."
    if sky is not Sky.CLEAR:
        return "the sky is grey."
    if time_cat is TimeCat.MORNING:
        return "it is a clear morning."
    if time_cat is TimeCat.NOON:
        return "it is midday."
    return "it is the afternoon."


def describe(
    location: Location, season: Season, time: GameTime, weather: WeatherState
) -> str:
    """Render the full description, one sentence per line."""
    lines = [location_line(location)]
    if weather.sky is Sky.CLOUDS:
        lines.append("it is cloudy.")
    lines.append(air_line(weather.wind, weather.sky, TempCat.classify(weather.temperature)))
    lines.append(time_line(time.classify(season), weather.sky))
    return "".join(f"{line}\n" for line in lines)


def sky_change_line(old: Sky, new: Sky, freezing: bool) -> str | None:
    """Event line for a sky transition, or None when nothing changes."""
    if old is new:
        return None
    if new is Sky.CLEAR:
        return "the sky clears up."
    if new is Sky.RAIN:
        return "it starts snowing." if freezing else "it starts raining."
    # new is CLOUDS
    if old is Sky.CLEAR:
        return "it gets cloudy."
    return "it stops snowing." if freezing else "it stops raining."
