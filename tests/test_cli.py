"""Tests for the command-line action loop."""
from __future__ import annotations

import io
import random
from typing import Sequence

from tick_weather.cli import build_config, main, parse_args, play
from tick_weather.config import SessionConfig
from tick_weather.session import Session
from tick_weather.types import Action, Season, Sky, Wind


class TestPlay:
    def test_quit_ends_loop(self, quiet_rng: random.Random) -> None:
        out = io.StringIO()
        picks = iter([3])

        def choose(choices: Sequence[object]) -> int:
            return next(picks)

        session = Session.spawn(out, choose, rng=quiet_rng)
        play(session, choose)
        assert out.getvalue() == session.last_description

    def test_actions_in_order(self, quiet_rng: random.Random) -> None:
        out = io.StringIO()
        picks = iter([2, 1, 0, 3])  # wait, go, north, quit
        offered: list[list[object]] = []

        def choose(choices: Sequence[object]) -> int:
            offered.append(list(choices))
            return next(picks)

        session = Session.spawn(out, choose, rng=quiet_rng, config=SessionConfig())
        play(session, choose)
        assert offered[0] == list(Action)
        assert str(session.time) == "06:06"
        assert out.getvalue().endswith("you head north.\n")


class TestArgs:
    def test_defaults(self) -> None:
        cfg = build_config(parse_args([]))
        assert cfg == SessionConfig()

    def test_overrides(self) -> None:
        cfg = build_config(
            parse_args(["--season", "summer", "--sky", "clear", "--wind", "none", "--time", "13:15"])
        )
        assert cfg.season is Season.SUMMER
        assert cfg.sky is Sky.CLEAR
        assert cfg.wind is Wind.NONE
        assert (cfg.start_hour, cfg.start_minute) == (13, 15)


class TestMain:
    def test_session_to_quit(self) -> None:
        out = io.StringIO()
        status = main(["--seed", "3"], stdin=io.StringIO("0\n2\n3\n"), stdout=out)
        assert status == 0
        text = out.getvalue()
        assert text.startswith("you are in a forest.\n")
        assert " 3) quit\n" in text
        assert "some time passes.\n" in text

    def test_end_of_input_exits_cleanly(self) -> None:
        out = io.StringIO()
        assert main(["--seed", "3"], stdin=io.StringIO(""), stdout=out) == 0
        assert out.getvalue().startswith("you are in a forest.\n")

    def test_seeded_runs_match(self) -> None:
        outputs = []
        for _ in range(2):
            out = io.StringIO()
            main(["--seed", "11"], stdin=io.StringIO("2\n" * 30 + "3\n"), stdout=out)
            outputs.append(out.getvalue())
        assert outputs[0] == outputs[1]

    def test_broken_sink_is_fatal(self, capsys) -> None:
        class BrokenSink:
            def write(self, text: str) -> int:
                raise BrokenPipeError("pipe closed")

        status = main(["--seed", "3"], stdin=io.StringIO("3\n"), stdout=BrokenSink())
        assert status == 1
        assert "fatal: pipe closed" in capsys.readouterr().err

    def test_bad_start_time(self, capsys) -> None:
        status = main(["--time", "25:00"], stdin=io.StringIO(""), stdout=io.StringIO())
        assert status == 2
        assert "error:" in capsys.readouterr().err
