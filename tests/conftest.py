"""Shared pytest fixtures for tests."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pytest

from layout_recall.errors import (
    PermissionDeniedError,
    WindowNotFoundError,
)
from layout_recall.models import Layout, Position, Size, WindowLayout
from layout_recall.store import LayoutStore


class FakeAccessor:
    """
    In-memory stand-in for WindowAccessor.

    ``windows`` maps a running application to its first window's geometry,
    or to ``None`` when it is running without a window.  Applications listed
    in ``denied`` raise PermissionDeniedError on every call.
    """

    def __init__(
        self,
        windows: Optional[Dict[str, Optional[Tuple[Position, Size]]]] = None,
        denied: Tuple[str, ...] = (),
    ) -> None:
        self.windows = dict(windows or {})
        self.denied = set(denied)
        self.calls: List[Tuple[str, str]] = []

    def list_running_applications(self) -> List[str]:
        self.calls.append(("list", ""))
        return list(self.windows)

    def get_window_geometry(self, app_name: str) -> Optional[WindowLayout]:
        self.calls.append(("get", app_name))
        if app_name in self.denied:
            raise PermissionDeniedError("denied")
        geometry = self.windows.get(app_name)
        if geometry is None:
            return None
        position, size = geometry
        return WindowLayout(app_name, position, size)

    def set_window_geometry(self, app_name: str, position: Position, size: Size) -> None:
        self.calls.append(("set", app_name))
        if app_name in self.denied:
            raise PermissionDeniedError("denied")
        if app_name not in self.windows:
            raise WindowNotFoundError(f"Application '{app_name}' is not running")
        if self.windows[app_name] is None:
            raise WindowNotFoundError(f"Application '{app_name}' has no open window")
        self.windows[app_name] = (position, size)


def make_window(app: str, x: int, y: int, w: int, h: int) -> WindowLayout:
    return WindowLayout(app, Position(x, y), Size(w, h))


@pytest.fixture
def fake_accessor() -> FakeAccessor:
    """Finder and Safari have windows, Music is running without one."""
    return FakeAccessor(
        {
            "Finder": (Position(0, 25), Size(800, 600)),
            "Safari": (Position(800, 25), Size(1120, 1055)),
            "Music": None,
        }
    )


@pytest.fixture
def store(tmp_path) -> LayoutStore:
    """LayoutStore backed by a file inside the test's tmp dir."""
    return LayoutStore(tmp_path / "layouts.json")


@pytest.fixture
def sample_layouts() -> List[Layout]:
    return [
        Layout(
            "Work",
            (
                make_window("Finder", 0, 25, 800, 600),
                make_window("Safari", 800, 25, 1120, 1055),
            ),
        ),
        Layout("Home", (make_window("Music", -1440, 0, 1024, 768),)),
    ]
