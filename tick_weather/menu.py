"""Line-oriented choice menu over a text sink and an input stream."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence, TextIO

if TYPE_CHECKING:
    from tick_weather.session import Choose, TextSink

PROMPT = "? "


def readln(out: TextSink, stream: TextIO, prompt: str = PROMPT) -> str:
    """Write ``prompt`` and read one stripped line. Raises EOFError at end of input."""
    out.write(prompt)
    _flush(out)
    line = stream.readline()
    if not line:
        raise EOFError("end of input")
    return line.strip()


def menu(out: TextSink, choices: Sequence[object], read_line: Callable[[], str]) -> int:
    """List ``choices`` and return the index the user picks.

    Invalid input is reported and the menu is shown again.
    """
    out.write("\n")
    while True:
        for n, choice in enumerate(choices):
            out.write(f" {n}) {choice}\n")
        out.write("\n")
        _flush(out)

        text = read_line()
        try:
            index = int(text)
        except ValueError:
            out.write(f"not a number: {text}\n\n")
            continue
        if 0 <= index < len(choices):
            out.write("\n")
            return index
        out.write("no such choice\n\n")


def make_chooser(out: TextSink, stream: TextIO) -> Choose:
    """Bind ``menu`` to a sink and an input stream."""

    def choose(choices: Sequence[object]) -> int:
        return menu(out, choices, lambda: readln(out, stream))

    return choose


def _flush(out: TextSink) -> None:
    flush = getattr(out, "flush", None)
    if flush is not None:
        flush()
