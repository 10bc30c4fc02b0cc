"""Errors raised at the menu tool's process boundary.

A cancelled menu is not an error: the entry points return None for it.
"""

from __future__ import annotations


class DMenuError(RuntimeError):
    """Base error for menu tool invocations."""

    def __init__(self, program: str, message: str):
        self.program = program
        super().__init__(message)


class LaunchError(DMenuError):
    """Raised when the menu tool cannot be found or started."""

    def __init__(self, program: str, reason: str = ""):
        message = f"Menu tool not available: {program}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(program, message)


class PipeError(DMenuError):
    """Raised when talking to the menu tool over its pipes fails."""

    def __init__(self, program: str, reason: str):
        self.reason = reason
        super().__init__(program, f"I/O error talking to {program}: {reason}")
