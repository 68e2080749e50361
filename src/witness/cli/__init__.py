"""CLI module for witness."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from witness.config import load_config
from witness.errors import IntrospectionError, WitnessError
from witness.introspection import LINES_PER_FRAME, resolve_line, verify_stack_layout


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for witness CLI."""
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    console = Console()

    if args.command == "selfcheck":
        raise SystemExit(_selfcheck(console))

    if args.command == "line":
        raise SystemExit(_line(console, args.file, args.line_number))

    if args.command == "config":
        raise SystemExit(_show_config(console))

    parser.print_help()
    raise SystemExit(0)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="witness", description="Witness call-site inspection tools")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser(
        "selfcheck", help="Verify that call sites resolve correctly on this interpreter"
    )

    line_parser = subparsers.add_parser("line", help="Print one line of a source file")
    line_parser.add_argument("file", help="Source file path")
    line_parser.add_argument("line_number", type=int, help="1-based line number")

    subparsers.add_parser("config", help="Show the resolved witness configuration")

    return parser


def _selfcheck(console: Console) -> int:
    """Resolve a known call site and report whether it matched."""
    try:
        location = verify_stack_layout()
    except IntrospectionError as exc:
        console.print(f"[red]Stack layout check failed:[/red] {escape(str(exc))}", highlight=False)
        return 1

    console.print(f"[green]Call sites resolve correctly[/green] ({escape(str(location))})", highlight=False)
    console.print(f"Lines per frame: {LINES_PER_FRAME}")
    return 0


def _line(console: Console, file: str, line_number: int) -> int:
    try:
        text = resolve_line(file, line_number)
    except IntrospectionError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
        return 1

    console.out(text, highlight=False)
    return 0


def _show_config(console: Console) -> int:
    try:
        config = load_config()
    except WitnessError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
        return 2

    for name, value in config.model_dump().items():
        console.print(f"{name} = {value!r}", highlight=False)
    return 0


__all__ = ["main"]
