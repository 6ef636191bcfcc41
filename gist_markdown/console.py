"""Colored console output with a pluggable sink."""

import sys
from collections.abc import Callable

COLORS = {
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "red": "\033[31m",
    "cyan": "\033[36m",
    "magenta": "\033[35m",
    "dim": "\033[2m",
    "bold": "\033[1m",
}
RESET = "\033[0m"

Sink = Callable[[str, str], None]


def ansi_sink(color: str, message: str) -> None:
    """Print ``message`` to stdout wrapped in the ANSI escape for ``color``."""
    print(f"{COLORS.get(color, '')}{message}{RESET}", file=sys.stdout, flush=True)


class Console:
    """Writes one colored line per call.

    The sink receives the color name and the plain message, so tests can
    collect output without stripping escape codes.
    """

    def __init__(self, sink: Sink | None = None):
        self.sink = sink or ansi_sink

    def log(self, color: str, message: str) -> None:
        self.sink(color, message)

    def info(self, message: str) -> None:
        self.log("blue", message)

    def success(self, message: str) -> None:
        self.log("green", message)

    def warn(self, message: str) -> None:
        self.log("yellow", message)

    def error(self, message: str) -> None:
        self.log("red", message)

    def note(self, message: str) -> None:
        self.log("cyan", message)


class RecordingSink:
    """Sink that keeps ``(color, message)`` pairs in memory."""

    def __init__(self):
        self.lines: list[tuple[str, str]] = []

    def __call__(self, color: str, message: str) -> None:
        self.lines.append((color, message))

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.lines]

    def text(self) -> str:
        return "\n".join(self.messages)
