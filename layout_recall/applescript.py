"""layout_recall.applescript
~~~~~~~~~~~~~~~~~~~~~~~~~~~

Thin synchronous bridge to ``osascript``.

Every call blocks until the interpreter exits.  There is deliberately no
timeout: a hung System Events call blocks the caller, which matches how the
rest of the tool sequences its work.

Only macOS ships ``osascript``; elsewhere every call raises AutomationError.
"""

from __future__ import annotations

import logging
import subprocess
from typing import List

from .constants import OSASCRIPT, PERMISSION_ERROR_CODES, PERMISSION_ERROR_MARKERS
from .errors import AutomationError, PermissionDeniedError

_LOG = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Internal helpers                                                            #
# --------------------------------------------------------------------------- #


def _is_permission_error(stderr: str) -> bool:
    low = stderr.lower()
    return any(code in stderr for code in PERMISSION_ERROR_CODES) or any(
        marker in low for marker in PERMISSION_ERROR_MARKERS
    )


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #


def quote(text: str) -> str:
    """Return *text* as an AppleScript string literal (including the quotes)."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def run_applescript(script: str) -> str:
    """
    Run *script* with osascript and return its stripped stdout.

    Raises
    ------
    PermissionDeniedError
        When macOS refuses Automation / Accessibility access.
    AutomationError
        On any other non-zero exit, or when osascript cannot be started.
    """
    try:
        result = subprocess.run(
            [OSASCRIPT, "-e", script],
            capture_output=True,
            text=True,
        )
    except (FileNotFoundError, PermissionError) as exc:
        raise AutomationError(f"Cannot run {OSASCRIPT}: {exc}") from exc

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        _LOG.debug("osascript exited %s: %s", result.returncode, stderr)
        if _is_permission_error(stderr):
            raise PermissionDeniedError(
                "macOS denied automation access; grant your terminal "
                "Accessibility and Automation permission in System Settings "
                f"({stderr})",
                returncode=result.returncode,
                stderr=stderr,
            )
        raise AutomationError(
            f"osascript failed with exit code {result.returncode}: {stderr}",
            returncode=result.returncode,
            stderr=stderr,
        )
    return (result.stdout or "").strip()


def parse_lines(output: str) -> List[str]:
    """Split newline-delimited osascript output, dropping blank lines."""
    return [line.strip() for line in output.splitlines() if line.strip()]


def parse_ints(output: str, expected: int) -> List[int]:
    """Parse ``"a, b, c"`` style output into exactly *expected* integers."""
    parts = [p.strip() for p in output.split(",")]
    if len(parts) != expected:
        raise AutomationError(
            f"Expected {expected} numbers from osascript, got {output!r}"
        )
    try:
        # System Events may report fractional points on scaled displays
        return [int(round(float(p))) for p in parts]
    except ValueError as exc:
        raise AutomationError(f"Unparsable osascript output {output!r}") from exc
