"""Console output shared by all witness reports."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from rich.console import Console, Group, RenderableType
from rich.pretty import pretty_repr
from rich.rule import Rule
from rich.text import Text

from witness.config import get_config

FAIL_STYLE = "red"
SUCCESS_STYLE = "green"
ACTUAL_STYLE = "yellow"
EXPECTED_STYLE = "blue"
DEBUG_STYLE = "magenta"
BENCHMARK_STYLE = "cyan"

CONSOLE_CONTEXT: ContextVar[Console | None] = ContextVar("witness_console", default=None)

_default_console: Console | None = None
_write_lock = threading.Lock()


def get_console() -> Console:
    """Return the console active for the current context.

    Without a scoped console, output goes to a stdout console that follows the
    current ``color`` setting.
    """
    global _default_console

    scoped = CONSOLE_CONTEXT.get()
    if scoped is not None:
        return scoped
    no_color = not get_config().color
    if _default_console is None or _default_console.no_color != no_color:
        _default_console = Console(no_color=no_color, highlight=False)
    return _default_console


@contextmanager
def console_scope(console: Console) -> Iterator[Console]:
    """Send witness output to ``console`` for the duration of the block."""
    token = CONSOLE_CONTEXT.set(console)
    try:
        yield console
    finally:
        CONSOLE_CONTEXT.reset(token)


def render_value(value: Any, fmt: str = "") -> str:
    """Render ``value`` according to a format hint.

    ``""`` or ``"p"`` pretty-prints, ``"r"`` uses repr, ``"s"`` uses str and
    anything else is passed to :func:`format` as a format spec.
    """
    if fmt in ("", "p"):
        return pretty_repr(value)
    if fmt == "r":
        return repr(value)
    if fmt == "s":
        return str(value)
    return format(value, fmt)


def styled(text: str, style: str | None = None) -> Text:
    return Text(text, style=style or "")


def separator() -> Rule:
    return Rule(style="dim", characters="_")


def emit(*renderables: RenderableType) -> None:
    """Write one report to the console without interleaving with other threads."""
    console = get_console()
    width = min(console.width, get_config().rule_width)
    with _write_lock:
        console.print(Group(*renderables), width=width, soft_wrap=True)
