"""
layout_recall.errors
--------------------

Exception hierarchy shared by the accessor, the store and the CLI.
"""

from __future__ import annotations


class LayoutRecallError(Exception):
    """Base class for every error raised by layout-recall."""


class AutomationError(LayoutRecallError, RuntimeError):
    """An osascript / System Events call failed."""

    def __init__(
        self, message: str, returncode: int | None = None, stderr: str = ""
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class PermissionDeniedError(AutomationError):
    """The calling process may not automate System Events."""


class WindowNotFoundError(AutomationError):
    """The named process is not running or has no open window."""


class LayoutFormatError(LayoutRecallError, ValueError):
    """A persisted layout does not match the expected JSON shape."""
