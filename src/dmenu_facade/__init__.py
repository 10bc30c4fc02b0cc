"""Pick an item from a Python list through dmenu.

Example:
    from dmenu_facade import DMenu

    chosen = DMenu().with_prompt("run:").vertical_with_lines(10).execute(items)
    if chosen is None:
        ...  # user cancelled
"""

__version__ = "0.1.0"

from .errors import DMenuError, LaunchError, PipeError
from .menu import DMenu
from .types import Color, Position, Selection

__all__ = [
    "DMenu",
    # Value types
    "Color",
    "Position",
    "Selection",
    # Errors
    "DMenuError",
    "LaunchError",
    "PipeError",
]
