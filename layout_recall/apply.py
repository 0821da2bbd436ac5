"""
layout_recall.apply
-------------------

Best-effort replay of a stored ``Layout``.

Entries are applied strictly in stored order, one at a time.  Each entry
activates its application before moving it, so the last entry ends up in
front.  A failure on one entry is recorded and the replay moves on; nothing
is rolled back.  Geometry is set to absolute values, so applying the same
layout twice gives the same result.
"""

from __future__ import annotations

import logging
from typing import Optional

from .accessor import WindowAccessor
from .errors import AutomationError
from .models import ApplyResult, EntryOutcome, Layout

_LOG = logging.getLogger(__name__)


def apply_layout(
    layout: Layout, accessor: Optional[WindowAccessor] = None
) -> ApplyResult:
    """Move every window of *layout* and report the outcome of each entry."""
    accessor = accessor or WindowAccessor()
    result = ApplyResult(layout_name=layout.name)

    for index, window in enumerate(layout.windows):
        try:
            accessor.set_window_geometry(window.app_name, window.position, window.size)
        except AutomationError as exc:
            _LOG.warning("Failed to restore '%s': %s", window.app_name, exc)
            result.outcomes.append(
                EntryOutcome(index=index, window=window, ok=False, error=str(exc))
            )
            continue
        result.outcomes.append(EntryOutcome(index=index, window=window, ok=True))

    _LOG.info("Layout '%s': %s", layout.name, result.summary())
    return result
