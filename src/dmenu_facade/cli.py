"""CLI interface for dmenu-facade.

Reads candidate lines from the arguments (or stdin), lets the user pick one
through dmenu and prints the choice.

Exit codes: 0 selection printed, 1 nothing selected, 2 tool/pipe error,
130 interrupted.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from . import config
from .errors import DMenuError
from .menu import DMenu
from .runner import select

EXIT_SELECTED = 0
EXIT_NO_SELECTION = 1
EXIT_ERROR = 2

_console = None


def _print_error(msg: str) -> None:
    """Print an error to stderr with Rich markup support. Falls back to plain print."""
    global _console
    if _console is None:
        try:
            from rich.console import Console
            _console = Console(stderr=True, highlight=False)
        except ImportError:
            _console = False
    if _console:
        from rich.markup import escape
        _console.print(f"[red]Error:[/red] {escape(msg)}", soft_wrap=True)
    else:
        print(f"Error: {msg}", file=sys.stderr)


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            stream=sys.stderr,
        )


def build_menu(args: argparse.Namespace, cfg: dict) -> DMenu:
    """Build a DMenu from config file settings overridden by CLI flags."""
    menu = DMenu.from_config(cfg.get("menu"))

    if args.program:
        menu = menu.with_program(args.program)
    if args.bottom:
        menu = menu.display_bottom()
    if args.case_insensitive:
        menu = menu.case_insensitive_matching()
    if args.lines is not None:
        menu = menu.vertical_with_lines(args.lines)
    if args.monitor is not None:
        menu = menu.display_on_monitor(args.monitor)
    if args.prompt is not None:
        menu = menu.with_prompt(args.prompt)
    if args.font is not None:
        menu = menu.with_font(args.font)
    if any(c is not None for c in (args.nb, args.nf, args.sb, args.sf)):
        menu = menu.with_colors(
            args.nb if args.nb is not None else menu.normal_background,
            args.nf if args.nf is not None else menu.normal_foreground,
            args.sb if args.sb is not None else menu.selected_background,
            args.sf if args.sf is not None else menu.selected_foreground,
        )
    return menu


def _read_items(args: argparse.Namespace) -> list[tuple[int, str]]:
    """Return (position, line) pairs; positions count skipped blank lines too."""
    lines = args.items if args.items else sys.stdin.read().splitlines()
    return [(n, line) for n, line in enumerate(lines) if line.strip()]


def cmd_select(args: argparse.Namespace, menu: DMenu) -> int:
    """Pick one line and print it (or its index)."""
    items = _read_items(args)
    selection = select(menu.to_args(), items, render=lambda pair: pair[1])
    if selection is None:
        return EXIT_NO_SELECTION
    position, line = selection.item
    print(position if args.index else line)
    return EXIT_SELECTED


def cmd_input(args: argparse.Namespace, menu: DMenu) -> int:
    """Prompt for free text and print it."""
    typed = menu.execute_as_input()
    if not typed:
        return EXIT_NO_SELECTION
    print(typed)
    return EXIT_SELECTED


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dmenu-facade",
        description="Pick one line through dmenu and print it.",
        epilog="Lines are read from stdin when no items are given.",
    )
    parser.add_argument("--version", action="version", version=f"dmenu-facade {__version__}")
    parser.add_argument("items", nargs="*", help="Candidate lines (default: read stdin)")
    parser.add_argument("-p", "--prompt", help="Prompt shown left of the input")
    parser.add_argument("-l", "--lines", type=int, help="List items vertically in N lines")
    parser.add_argument("-b", "--bottom", action="store_true", help="Show at the bottom of the screen")
    parser.add_argument("-i", "--case-insensitive", action="store_true",
                        help="Match items case-insensitively")
    parser.add_argument("-m", "--monitor", type=int, help="Monitor to show on (from 0)")
    parser.add_argument("--font", help="Font specification, passed verbatim")
    parser.add_argument("--nb", help="Normal background color")
    parser.add_argument("--nf", help="Normal foreground color")
    parser.add_argument("--sb", help="Selected background color")
    parser.add_argument("--sf", help="Selected foreground color")
    parser.add_argument("--program", help="dmenu-compatible executable on PATH (default: dmenu)")
    parser.add_argument("--input", action="store_true",
                        help="Ask for free text instead of choosing an item")
    parser.add_argument("--index", action="store_true",
                        help="Print the chosen line's 0-based position in the input instead of its text")
    parser.add_argument("--config", type=Path, help="Config file (default: ~/.config/dmenu-facade/config.yaml)")
    parser.add_argument("--debug", action="store_true", help="Log the tool invocation to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = config.load_config(args.config)
    _configure_logging(args.debug or config.is_debug_enabled(cfg))

    try:
        menu = build_menu(args, cfg)
        if args.input:
            return cmd_input(args, menu)
        return cmd_select(args, menu)
    except ValueError as e:
        _print_error(f"Invalid configuration: {e}")
        return EXIT_ERROR
    except DMenuError as e:
        _print_error(str(e))
        return EXIT_ERROR
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
