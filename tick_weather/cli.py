"""Command-line entry point: a flat describe/go/wait/quit loop.

Run:
    python -m tick_weather [OPTIONS]

Options:
    --seed       RNG seed (default: fresh entropy)
    --season     spring | summer | autumn | winter (default: winter)
    --sky        clear | clouds | rain (default: rain)
    --wind       none | light | medium | high (default: high)
    --time       Start time as HH:MM (default: 06:00)
    -v           Log engine internals to stderr
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Sequence, TextIO

from tick_weather.config import ConfigError, SessionConfig, parse_time
from tick_weather.menu import make_chooser
from tick_weather.session import Choose, Session, TextSink
from tick_weather.types import Action, Season, Sky, Wind

logger = logging.getLogger(__name__)


def play(session: Session, choose: Choose) -> None:
    """Describe once, then act on chosen actions until Quit."""
    session.act(Action.DESCRIBE)
    while True:
        actions = session.available_actions()
        action = actions[choose(actions)]
        if session.act(action):
            break


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="tick-weather",
        description="Wander a forest while the weather changes around you.",
    )
    p.add_argument("--seed", type=int, default=None, help="RNG seed (default: fresh entropy)")
    p.add_argument("--season", choices=[s.value for s in Season], default=Season.WINTER.value)
    p.add_argument("--sky", choices=[s.value for s in Sky], default=Sky.RAIN.value)
    p.add_argument("--wind", choices=[w.name.lower() for w in Wind], default="high")
    p.add_argument("--time", default="06:00", help="Start time as HH:MM (default: 06:00)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log engine internals to stderr")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> SessionConfig:
    hour, minute = parse_time(args.time)
    return SessionConfig(
        start_hour=hour,
        start_minute=minute,
        season=Season(args.season),
        sky=Sky(args.sky),
        wind=Wind[args.wind.upper()],
    )


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextSink | None = None,
) -> int:
    args = parse_args(argv)
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    try:
        config = build_config(args)
    except ConfigError as err:
        print(f"error: {err}", file=sys.stderr)
        return 2

    rng = random.Random(args.seed) if args.seed is not None else None
    choose = make_chooser(stdout, stdin)
    session = Session.spawn(stdout, choose, rng=rng, config=config)
    logger.debug("session started at %s in %s", session.time, session.season.value)

    try:
        play(session, choose)
    except EOFError:
        logger.debug("input closed, leaving")
    except OSError as err:
        print(f"fatal: {err}", file=sys.stderr)
        return 1
    return 0
