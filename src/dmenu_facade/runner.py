"""Run the menu tool as a subprocess and map its answer back to an item.

One round trip:
1. Render every candidate to a single display line
2. Index lines by text (the last candidate with a given text wins)
3. Launch the tool with the configured argument vector
4. Write the lines to its stdin, read its stdout to EOF, reap it
5. Resolve the first output line back to a candidate
"""

from __future__ import annotations

import logging
import subprocess
from typing import Any, Callable, Iterable, Sequence

from .errors import LaunchError, PipeError
from .types import Selection

logger = logging.getLogger(__name__)

RenderFn = Callable[[Any], str]


def render_items(items: Iterable[Any], render: RenderFn = str) -> list[str]:
    """Render candidates to display lines, in input order.

    Line breaks inside a rendering are folded into spaces so that every
    candidate occupies exactly one line of the tool's input.
    """
    return [" ".join(str(render(item)).splitlines()) for item in items]


def build_rendering_map(lines: Sequence[str]) -> dict[str, int]:
    """Map each display line to the index of the last candidate rendering it."""
    rendering_map: dict[str, int] = {}
    for index, line in enumerate(lines):
        rendering_map[line] = index
    return rendering_map


def run_menu(args: Sequence[str], lines: Sequence[str]) -> str | None:
    """Feed lines to the menu tool and return the first line it prints.

    Args:
        args: Full argument vector; args[0] is looked up on PATH.
        lines: Display lines, written one per line in order.

    Returns:
        The first output line without its newline, or None if the tool
        printed nothing (the user cancelled). The exit status is not
        consulted.

    Raises:
        LaunchError: If the tool is missing or not executable.
        PipeError: If writing, reading or decoding fails.
    """
    program = args[0]
    try:
        payload = "".join(f"{line}\n" for line in lines).encode("utf-8")
    except UnicodeEncodeError as e:
        raise PipeError(program, f"input is not encodable as UTF-8: {e}") from e

    logger.debug("Launching %s with %d line(s)", list(args), len(lines))
    try:
        proc = subprocess.Popen(
            list(args),
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
        )
    except OSError as e:
        raise LaunchError(program, e.strerror or str(e)) from e
    except ValueError as e:
        # e.g. an embedded NUL byte in one of the arguments
        raise LaunchError(program, str(e)) from e

    with proc:
        try:
            stdout, _ = proc.communicate(payload)
        except OSError as e:
            proc.kill()
            raise PipeError(program, str(e)) from e
        except BaseException:
            proc.kill()
            raise

    logger.debug("%s exited with status %s", program, proc.returncode)

    if not stdout:
        return None

    # Only the first line is decoded; anything after it is ignored.
    first_line = stdout.split(b"\n", 1)[0].removesuffix(b"\r")
    try:
        return first_line.decode("utf-8")
    except UnicodeDecodeError as e:
        raise PipeError(program, f"output is not valid UTF-8: {e}") from e


def select(
    args: Sequence[str],
    items: Sequence[Any],
    render: RenderFn = str,
) -> Selection | None:
    """Let the user pick one of items through the menu tool.

    Returns:
        A Selection for the chosen candidate, or None when the user cancelled
        or the tool answered with text that matches no candidate.

    Raises:
        LaunchError: If the tool is missing or not executable.
        PipeError: If the pipes to the tool fail.
    """
    lines = render_items(items, render)
    rendering_map = build_rendering_map(lines)

    chosen = run_menu(args, lines)
    if chosen is None:
        logger.debug("No selection made")
        return None

    index = rendering_map.get(chosen)
    if index is None:
        logger.debug("Tool returned unknown text %r", chosen)
        return None

    logger.debug("Selected index %d: %r", index, chosen)
    return Selection(item=items[index], index=index, text=chosen)
