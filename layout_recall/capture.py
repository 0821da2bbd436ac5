"""
layout_recall.capture
---------------------

Turn a list of selected applications into a new, unsaved ``Layout``.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .accessor import WindowAccessor
from .errors import AutomationError
from .models import Layout, WindowLayout

_LOG = logging.getLogger(__name__)


def capture(
    name: str,
    app_names: Iterable[str],
    accessor: Optional[WindowAccessor] = None,
) -> Layout:
    """
    Read the first window of each application in *app_names*, in order.

    Applications without a window, or whose window cannot be read, are
    skipped with a log line; the returned layout may therefore hold fewer
    windows than applications requested.  Persisting the result is left to
    the caller.
    """
    accessor = accessor or WindowAccessor()
    windows: List[WindowLayout] = []
    for app_name in app_names:
        try:
            window = accessor.get_window_geometry(app_name)
        except AutomationError as exc:
            _LOG.warning("Skipping '%s': %s", app_name, exc)
            continue
        if window is None:
            _LOG.info("Skipping '%s': no open window", app_name)
            continue
        windows.append(window)

    _LOG.debug("Captured %d window(s) for layout '%s'", len(windows), name)
    return Layout(name=name, windows=tuple(windows))
