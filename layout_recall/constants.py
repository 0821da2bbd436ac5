"""
layout_recall.constants
-----------------------

Centralised constants shared across the layout-recall code-base.
"""

from pathlib import Path
from typing import Final
import os

# --------------------------------------------------------------------------- #
# Environment variables                                                       #
# --------------------------------------------------------------------------- #

# Overrides the location of the persisted layouts file.
LAYOUTS_FILE_ENV: Final[str] = "LAYOUT_RECALL_FILE"

# Overrides the osascript binary (handy for wrappers or odd installs).
OSASCRIPT_ENV: Final[str] = "LAYOUT_RECALL_OSASCRIPT"

# --------------------------------------------------------------------------- #
# Paths                                                                       #
# --------------------------------------------------------------------------- #

# Default location of the JSON layouts file.
DEFAULT_LAYOUTS_FILE: Final[Path] = Path.home() / ".config/layout-recall/layouts.json"

# Location of the persistent JSON layouts file (override with $LAYOUT_RECALL_FILE).
LAYOUTS_FILE: Final[Path] = Path(
    os.environ.get(LAYOUTS_FILE_ENV, DEFAULT_LAYOUTS_FILE)
).expanduser()

# AppleScript interpreter shipped with macOS.
OSASCRIPT: Final[str] = os.environ.get(OSASCRIPT_ENV, "/usr/bin/osascript")

# --------------------------------------------------------------------------- #
# Automation                                                                  #
# --------------------------------------------------------------------------- #

# Every window operation targets this index of the named process.  System
# Events addresses windows positionally, so only the frontmost window of an
# application is capturable and restorable.
WINDOW_INDEX: Final[int] = 1

# AppleScript error numbers / message fragments that mean the user has not
# granted Automation or Accessibility permission to the calling terminal.
PERMISSION_ERROR_CODES: Final[tuple[str, ...]] = ("-1743", "-1719", "-25211")
PERMISSION_ERROR_MARKERS: Final[tuple[str, ...]] = (
    "not allowed assistive access",
    "not authorized to send apple events",
    "not allowed to send keystrokes",
)

# Exit status used by the CLI when a layout was only partially applied.
PARTIAL_APPLY_EXIT: Final[int] = 2
