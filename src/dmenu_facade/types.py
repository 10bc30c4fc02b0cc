"""Type definitions for dmenu-facade.

Shared value types (enums, dataclasses) used by the builder and the runner.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Position(str, Enum):
    """Where the menu bar is drawn on screen."""

    TOP = "top"
    BOTTOM = "bottom"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "Position":
        """Parse a position name, case-insensitively.

        Raises:
            ValueError: If the name is not a known position.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown position: {value!r}") from None


@dataclass(frozen=True)
class Color:
    """A color string handed to the menu tool verbatim (e.g. "#ffffff")."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Selection:
    """Outcome of a successful selection round trip.

    Attributes:
        item: The candidate the chosen line maps back to.
        index: Position of that candidate in the input sequence.
        text: The rendered line the tool returned.
    """

    item: Any
    index: int
    text: str
