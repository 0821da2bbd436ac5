"""
layout_recall.accessor
----------------------

The only part of layout-recall that talks to the operating system.

All window operations go through System Events and address *window 1* of a
process looked up by its display name.  System Events exposes windows
positionally per process, not by a persistent handle, so only the frontmost
window of each application can be captured or restored.

``WindowAccessor`` is a small class rather than bare functions so capture,
apply and the tests can substitute another object with the same three
methods.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .applescript import parse_ints, parse_lines, quote, run_applescript
from .constants import WINDOW_INDEX
from .errors import WindowNotFoundError
from .models import Position, Size, WindowLayout

_LOG = logging.getLogger(__name__)

# Sentinels returned by the scripts below instead of raising AppleScript errors
_NO_PROCESS = "__no_process__"
_NO_WINDOW = "__no_window__"
_OK = "__ok__"

# --------------------------------------------------------------------------- #
# AppleScript sources                                                         #
# --------------------------------------------------------------------------- #

_LIST_APPS_SCRIPT = """
tell application "System Events"
    set appList to name of every application process whose background only is false
end tell
set AppleScript's text item delimiters to linefeed
return appList as text
"""


def _get_geometry_script(app_name: str) -> str:
    proc = quote(app_name)
    return f"""
tell application "System Events"
    if not (exists process {proc}) then return "{_NO_PROCESS}"
    tell process {proc}
        if not (exists window {WINDOW_INDEX}) then return "{_NO_WINDOW}"
        set pos to position of window {WINDOW_INDEX}
        set sz to size of window {WINDOW_INDEX}
        return {{item 1 of pos, item 2 of pos, item 1 of sz, item 2 of sz}}
    end tell
end tell
"""


def _set_geometry_script(app_name: str, position: Position, size: Size) -> str:
    proc = quote(app_name)
    return f"""
tell application "System Events"
    if not (exists process {proc}) then return "{_NO_PROCESS}"
end tell
tell application {proc} to activate
tell application "System Events"
    tell process {proc}
        if not (exists window {WINDOW_INDEX}) then return "{_NO_WINDOW}"
        set position of window {WINDOW_INDEX} to {{{position.x}, {position.y}}}
        set size of window {WINDOW_INDEX} to {{{size.width}, {size.height}}}
    end tell
end tell
return "{_OK}"
"""


# --------------------------------------------------------------------------- #
# Accessor                                                                    #
# --------------------------------------------------------------------------- #


class WindowAccessor:
    """Query and move the first window of named applications via osascript."""

    def __init__(self, runner: Callable[[str], str] = run_applescript) -> None:
        self._run = runner

    def list_running_applications(self) -> List[str]:
        """
        Names of running, non-background processes in the order System Events
        reports them.  Failures propagate: there is no sensible empty answer
        for "cannot enumerate".
        """
        names = parse_lines(self._run(_LIST_APPS_SCRIPT))
        _LOG.debug("Running applications: %s", names)
        return names

    def get_window_geometry(self, app_name: str) -> Optional[WindowLayout]:
        """
        Position and size of *app_name*'s first window, read in one call.

        Returns ``None`` when the process is not running or has no window.
        Other automation failures raise AutomationError.
        """
        output = self._run(_get_geometry_script(app_name))
        if output in (_NO_PROCESS, _NO_WINDOW, ""):
            _LOG.debug("get_window_geometry(%s): %s", app_name, output or "empty")
            return None
        x, y, width, height = parse_ints(output, 4)
        return WindowLayout(app_name, Position(x, y), Size(width, height))

    def set_window_geometry(self, app_name: str, position: Position, size: Size) -> None:
        """
        Activate *app_name*, then set its first window's position, then its
        size.  The two set commands are independent; a failure or a user
        drag between them is not rolled back.

        Raises WindowNotFoundError when the process or window is missing and
        AutomationError for any other failure.
        """
        output = self._run(_set_geometry_script(app_name, position, size))
        if output == _NO_PROCESS:
            raise WindowNotFoundError(f"Application '{app_name}' is not running")
        if output == _NO_WINDOW:
            raise WindowNotFoundError(f"Application '{app_name}' has no open window")
        _LOG.debug(
            "Moved %s to (%d, %d) %dx%d",
            app_name,
            position.x,
            position.y,
            size.width,
            size.height,
        )
