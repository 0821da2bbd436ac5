"""
layout_recall.models
--------------------

Plain records for captured window placements and the results of operating on
them.

Design
~~~~~~
" ``WindowLayout`` identifies a window only by the *display name* of its
  owning process.  Re-applying always targets the first window of that
  process; there is no stable window handle.
" ``Layout`` keeps its windows in capture order.  Apply replays them in the
  same order because each entry re-activates its application, so later
  entries can be raised over earlier ones.
" ``to_dict`` / ``from_dict`` produce and accept exactly the JSON shape of the
  layouts file (``appName``, ``position{x,y}``, ``size{width,height}``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .errors import LayoutFormatError

# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #


def _as_int(raw: Any, what: str) -> int:
    # bool is an int subclass; a JSON true/false is never a coordinate
    if isinstance(raw, bool):
        raise LayoutFormatError(f"{what} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    raise LayoutFormatError(f"{what} must be an integer, got {raw!r}")


def _require(raw: Dict[str, Any], key: str, what: str) -> Any:
    if not isinstance(raw, dict):
        raise LayoutFormatError(f"{what} must be an object, got {type(raw).__name__}")
    if key not in raw:
        raise LayoutFormatError(f"{what} is missing '{key}'")
    return raw[key]


# --------------------------------------------------------------------------- #
# Geometry                                                                    #
# --------------------------------------------------------------------------- #


@dataclass(slots=True, frozen=True)
class Position:
    """Top-left corner in screen coordinates (may be negative)."""

    x: int
    y: int


@dataclass(slots=True, frozen=True)
class Size:
    width: int
    height: int


@dataclass(slots=True, frozen=True)
class WindowLayout:
    """Placement of the first window of the process called *app_name*."""

    app_name: str
    position: Position
    size: Size

    def to_dict(self) -> Dict[str, Any]:
        return {
            "appName": self.app_name,
            "position": {"x": self.position.x, "y": self.position.y},
            "size": {"width": self.size.width, "height": self.size.height},
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "WindowLayout":
        app_name = _require(raw, "appName", "window")
        if not isinstance(app_name, str):
            raise LayoutFormatError(f"appName must be a string, got {app_name!r}")
        pos = _require(raw, "position", "window")
        size = _require(raw, "size", "window")
        return cls(
            app_name=app_name,
            position=Position(
                _as_int(_require(pos, "x", "position"), "position.x"),
                _as_int(_require(pos, "y", "position"), "position.y"),
            ),
            size=Size(
                _as_int(_require(size, "width", "size"), "size.width"),
                _as_int(_require(size, "height", "size"), "size.height"),
            ),
        )


@dataclass(slots=True, frozen=True)
class Layout:
    """A named, ordered collection of window placements."""

    name: str
    windows: tuple[WindowLayout, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but always store an immutable tuple
        if not isinstance(self.windows, tuple):
            object.__setattr__(self, "windows", tuple(self.windows))

    @property
    def app_names(self) -> List[str]:
        return [w.app_name for w in self.windows]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "windows": [w.to_dict() for w in self.windows]}

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Layout":
        name = _require(raw, "name", "layout")
        if not isinstance(name, str):
            raise LayoutFormatError(f"layout name must be a string, got {name!r}")
        windows = _require(raw, "windows", "layout")
        if not isinstance(windows, list):
            raise LayoutFormatError(f"layout '{name}' windows must be a list")
        return cls(name=name, windows=tuple(WindowLayout.from_dict(w) for w in windows))


def layouts_to_json(layouts: Iterable[Layout]) -> List[Dict[str, Any]]:
    """Serialise *layouts* into the JSON-ready list stored on disk."""
    return [layout.to_dict() for layout in layouts]


def layouts_from_json(raw: Any) -> List[Layout]:
    """Parse the on-disk JSON array.  Raises LayoutFormatError on bad shape."""
    if not isinstance(raw, list):
        raise LayoutFormatError(
            f"layouts file must hold a JSON array, got {type(raw).__name__}"
        )
    return [Layout.from_dict(item) for item in raw]


# --------------------------------------------------------------------------- #
# Results                                                                     #
# --------------------------------------------------------------------------- #


@dataclass(slots=True, frozen=True)
class SaveResult:
    """Outcome of writing the layouts file."""

    ok: bool
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok


@dataclass(slots=True, frozen=True)
class EntryOutcome:
    """What happened to one window entry during apply."""

    index: int
    window: WindowLayout
    ok: bool
    error: Optional[str] = None

    @property
    def app_name(self) -> str:
        return self.window.app_name


@dataclass(slots=True)
class ApplyResult:
    """Per-entry report of a layout replay, in stored order."""

    layout_name: str
    outcomes: List[EntryOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> List[EntryOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> List[EntryOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        """True when every entry was restored (vacuously true for no entries)."""
        return not self.failed

    def summary(self) -> str:
        return f"{len(self.succeeded)} of {self.total} windows restored"
