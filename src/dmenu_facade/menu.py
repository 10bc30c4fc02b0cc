"""The DMenu configuration builder and its selection entry points.

Example:
    from dmenu_facade import DMenu

    items = ["Hello", "World", "!"]
    chosen = (
        DMenu()
        .vertical_with_lines(2)
        .case_insensitive_matching()
        .with_prompt("Pick one:")
        .execute(items)
    )
    if chosen is not None:
        print(chosen)

Items are shown using str(item) unless a render callable is given. Renderings
should be unique: when several items render to the same text, the last of
them is returned.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterable, Mapping, MutableSequence, Sequence

from .runner import RenderFn, run_menu, select
from .types import Color, Position


DEFAULT_PROGRAM = "dmenu"


def _as_color(value: Color | str | None) -> Color | None:
    if value is None or isinstance(value, Color):
        return value
    return Color(str(value))


def _as_int(settings: Mapping[str, Any], key: str) -> int:
    try:
        return int(settings[key])
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be an integer, got {settings[key]!r}") from None


@dataclass(frozen=True)
class DMenu:
    """Immutable dmenu configuration, built by chaining setters.

    Every setter returns a new DMenu; the default instance runs the tool
    with no flags at all. Values are not validated here, the tool rejects
    what it does not understand when it runs.

    Attributes:
        program: Executable name, looked up on PATH.
        position: TOP (tool default) or BOTTOM.
        case_insensitive: Match input case-insensitively (-i).
        vertical_lines: Show items vertically in this many lines (-l).
        monitor: Monitor index to display on, starting at 0 (-m).
        prompt: Prompt shown left of the input field (-p).
        font: Font specification passed through verbatim (-fn).
        normal_background: Normal background color (-nb).
        normal_foreground: Normal foreground color (-nf).
        selected_background: Selected background color (-sb).
        selected_foreground: Selected foreground color (-sf).
        window_id: Embed into this X window id (-w).
        grab_keyboard_first: Grab the keyboard before reading stdin (-f).
        extra_args: Further arguments appended verbatim.
    """

    program: str = DEFAULT_PROGRAM
    position: Position = Position.TOP
    case_insensitive: bool = False
    vertical_lines: int | None = None
    monitor: int | None = None
    prompt: str | None = None
    font: str | None = None
    normal_background: Color | None = None
    normal_foreground: Color | None = None
    selected_background: Color | None = None
    selected_foreground: Color | None = None
    window_id: str | None = None
    grab_keyboard_first: bool = False
    extra_args: tuple[str, ...] = ()

    # ── builder ──────────────────────────────────────────────────────────

    def display_bottom(self) -> DMenu:
        """Display the menu at the bottom of the screen instead of the top."""
        return replace(self, position=Position.BOTTOM)

    def display_top(self) -> DMenu:
        """Display the menu at the top of the screen (the tool default)."""
        return replace(self, position=Position.TOP)

    def case_insensitive_matching(self) -> DMenu:
        """Match typed input against items case-insensitively."""
        return replace(self, case_insensitive=True)

    def vertical_with_lines(self, amount: int) -> DMenu:
        """List items vertically, showing the given number of lines."""
        return replace(self, vertical_lines=amount)

    def display_on_monitor(self, monitor_id: int) -> DMenu:
        """Display on a specific monitor. Index starts at 0."""
        return replace(self, monitor=monitor_id)

    def with_prompt(self, prompt: str) -> DMenu:
        """Show a prompt to the left of the selections."""
        return replace(self, prompt=prompt)

    def with_font(self, font: str) -> DMenu:
        """Use the given font, e.g. "FiraCodeNerdFont:size=13"."""
        return replace(self, font=font)

    def with_colors(
        self,
        normal_background: Color | str | None = None,
        normal_foreground: Color | str | None = None,
        selected_background: Color | str | None = None,
        selected_foreground: Color | str | None = None,
    ) -> DMenu:
        """Set the menu colors.

        Any color left as None falls back to the tool's default.

        Example:
            DMenu().with_colors("#ffffff", "#000000", None, None)
        """
        return replace(
            self,
            normal_background=_as_color(normal_background),
            normal_foreground=_as_color(normal_foreground),
            selected_background=_as_color(selected_background),
            selected_foreground=_as_color(selected_foreground),
        )

    def embed_into_window(self, window_id: int | str) -> DMenu:
        return replace(self, window_id=str(window_id))

    def grab_keyboard(self) -> DMenu:
        return replace(self, grab_keyboard_first=True)

    def with_args(self, *args: str) -> DMenu:
        """Append arguments for flags this builder has no setter for."""
        return replace(self, extra_args=self.extra_args + tuple(str(a) for a in args))

    def with_program(self, program: str) -> DMenu:
        """Run a different dmenu-compatible executable found on PATH."""
        return replace(self, program=program)

    @classmethod
    def from_config(cls, settings: Mapping[str, Any] | None) -> DMenu:
        """Build a DMenu from a settings mapping (the config file's "menu" table).

        Keys that are missing or None keep their defaults; unknown keys are
        ignored.

        Raises:
            ValueError: If a setting has the wrong type or value.
        """
        menu = cls()
        if not settings:
            return menu
        if not isinstance(settings, Mapping):
            raise ValueError(f"menu settings must be a mapping, got {type(settings).__name__}")

        if settings.get("program"):
            menu = menu.with_program(str(settings["program"]))
        if settings.get("position"):
            menu = replace(menu, position=Position.from_string(str(settings["position"])))
        if settings.get("case_insensitive"):
            menu = menu.case_insensitive_matching()
        if settings.get("lines") is not None:
            menu = menu.vertical_with_lines(_as_int(settings, "lines"))
        if settings.get("monitor") is not None:
            menu = menu.display_on_monitor(_as_int(settings, "monitor"))
        if settings.get("prompt") is not None:
            menu = menu.with_prompt(str(settings["prompt"]))
        if settings.get("font") is not None:
            menu = menu.with_font(str(settings["font"]))

        colors = settings.get("colors") or {}
        if not isinstance(colors, Mapping):
            raise ValueError(f"colors must be a mapping, got {type(colors).__name__}")
        if colors:
            menu = menu.with_colors(
                colors.get("normal_background"),
                colors.get("normal_foreground"),
                colors.get("selected_background"),
                colors.get("selected_foreground"),
            )

        if settings.get("window_id") is not None:
            menu = menu.embed_into_window(settings["window_id"])
        if settings.get("grab_keyboard"):
            menu = menu.grab_keyboard()

        extra_args = settings.get("extra_args")
        if isinstance(extra_args, str):
            extra_args = [extra_args]
        if extra_args:
            if not isinstance(extra_args, (list, tuple)):
                raise ValueError(f"extra_args must be a list, got {type(extra_args).__name__}")
            menu = menu.with_args(*extra_args)
        return menu

    # ── invocation ───────────────────────────────────────────────────────

    def to_args(self) -> list[str]:
        """Build the tool's argument vector; unset options add no flags."""
        args = [self.program]
        if self.position is Position.BOTTOM:
            args.append("-b")
        if self.grab_keyboard_first:
            args.append("-f")
        if self.case_insensitive:
            args.append("-i")
        if self.vertical_lines is not None:
            args += ["-l", str(self.vertical_lines)]
        if self.monitor is not None:
            args += ["-m", str(self.monitor)]
        if self.prompt is not None:
            args += ["-p", self.prompt]
        if self.font is not None:
            args += ["-fn", self.font]

        colors = [
            ("-nb", self.normal_background),
            ("-nf", self.normal_foreground),
            ("-sb", self.selected_background),
            ("-sf", self.selected_foreground),
        ]
        for flag, color in colors:
            if color is not None:
                args += [flag, str(color)]

        if self.window_id is not None:
            args += ["-w", self.window_id]
        args.extend(self.extra_args)
        return args

    def execute(self, items: Iterable[Any], render: RenderFn = str) -> Any | None:
        """Show items and return the one the user picked.

        The returned object is the element of items itself; items is left
        untouched.

        Args:
            items: Candidates to choose from.
            render: Produces an item's display text (default: str).

        Returns:
            The chosen item, or None if the user cancelled.

        Raises:
            LaunchError: If the tool is not available.
            PipeError: If communicating with the tool fails.
        """
        candidates = items if isinstance(items, Sequence) else list(items)
        selection = select(self.to_args(), candidates, render)
        return None if selection is None else selection.item

    def execute_consume(self, items: MutableSequence[Any], render: RenderFn = str) -> Any | None:
        """Like execute, but takes the chosen item out of items.

        On a selection the item is removed from items and returned; when the
        user cancels, items is left as it was.
        """
        if not isinstance(items, MutableSequence):
            raise TypeError(f"execute_consume needs a mutable sequence, got {type(items).__name__}")
        selection = select(self.to_args(), items, render)
        if selection is None:
            return None
        del items[selection.index]
        return selection.item

    def execute_as_input(self) -> str:
        """Run the menu with no items and return the text the user typed.

        Returns an empty string when the user cancelled.
        """
        typed = run_menu(self.to_args(), [])
        return typed or ""
