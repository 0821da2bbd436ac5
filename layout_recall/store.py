"""
layout_recall.store
-------------------

Persistent storage of named window layouts.

The whole collection lives in one JSON array on disk and is always read and
written as a unit.  The store is synchronous and keeps no in-memory cache:
every call re-reads the file, so two stores pointed at the same path never
disagree for long.

Design
~~~~~~
" ``load`` prefers availability: a missing, unreadable or malformed file
  yields an empty list and a logged warning, never an exception.
" ``save`` never raises either, but unlike a bare log-and-forget it returns a
  ``SaveResult`` so callers can tell a failed write from a successful one.
" Writes go to a temp file that is fsync'ed and then renamed over the target;
  a naive file-lock (fcntl) guards against torn writes from concurrent
  writers.  Read-modify-write cycles are *not* serialised.
"""

from __future__ import annotations

import fcntl
import json
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional

from .constants import LAYOUTS_FILE
from .models import Layout, SaveResult, layouts_from_json, layouts_to_json

_LOG = logging.getLogger(__name__)


class LayoutStore:
    """Read/write the layouts file at *path*."""

    def __init__(self, path: Path | str = LAYOUTS_FILE) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    # ---------------  disk I/O  ------------------------------------------- #

    def load(self) -> List[Layout]:
        """Return every stored layout, or ``[]`` when nothing usable exists."""
        if not self._path.exists():
            _LOG.debug("No layouts file at %s", self._path)
            return []

        try:
            with self._path.open("r", encoding="utf-8") as fp:
                fcntl.flock(fp.fileno(), fcntl.LOCK_SH)
                raw = json.load(fp)
                fcntl.flock(fp.fileno(), fcntl.LOCK_UN)
            return layouts_from_json(raw)
        # ValueError covers JSONDecodeError, UnicodeDecodeError and LayoutFormatError
        except (OSError, ValueError, RecursionError) as exc:
            _LOG.warning("Failed to load layouts from %s: %s", self._path, exc)
            return []

    def _write_atomic(self, data: list) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8") as fp:
                fcntl.flock(fp.fileno(), fcntl.LOCK_EX)
                json.dump(data, fp, indent=2)
                fp.flush()
                os.fsync(fp.fileno())
                fcntl.flock(fp.fileno(), fcntl.LOCK_UN)
            tmp_path.replace(self._path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

    def save(self, layouts: Iterable[Layout]) -> SaveResult:
        """
        Overwrite the file with *layouts*.

        Duplicate names are written as given; uniqueness is the job of
        ``put``.  Failures are logged and reported in the result, never
        raised.
        """
        data = layouts_to_json(layouts)
        try:
            self._write_atomic(data)
        except OSError as exc:
            _LOG.error("Failed to write layouts to %s: %s", self._path, exc)
            return SaveResult(ok=False, error=str(exc))
        _LOG.debug("Wrote %d layout(s) to %s", len(data), self._path)
        return SaveResult(ok=True)

    # ---------------  public API  ----------------------------------------- #

    def names(self) -> List[str]:
        return [layout.name for layout in self.load()]

    def get(self, name: str) -> Optional[Layout]:
        """Return the layout called *name*; the last one wins on duplicates."""
        found: Optional[Layout] = None
        for layout in self.load():
            if layout.name == name:
                found = layout
        return found

    def put(self, layout: Layout) -> SaveResult:
        """
        Insert *layout*, replacing any stored layout with the same name.

        The replacement keeps the slot of the first same-named layout so the
        listing order does not jump around on re-save.
        """
        updated: List[Layout] = []
        replaced = False
        for existing in self.load():
            if existing.name != layout.name:
                updated.append(existing)
            elif not replaced:
                updated.append(layout)
                replaced = True
        if not replaced:
            updated.append(layout)
        else:
            _LOG.info("Overwriting existing layout '%s'", layout.name)
        return self.save(updated)

    def delete(self, name: str) -> SaveResult:
        """Drop every layout called *name* and persist the remainder."""
        layouts = self.load()
        remaining = [layout for layout in layouts if layout.name != name]
        if len(remaining) == len(layouts):
            _LOG.debug("delete: no layout named '%s'", name)
        return self.save(remaining)
