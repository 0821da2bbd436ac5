"""
Tests for the layout data model and its JSON shape.
"""

import pytest

from layout_recall.errors import LayoutFormatError
from layout_recall.models import (
    ApplyResult,
    EntryOutcome,
    Layout,
    Position,
    SaveResult,
    Size,
    WindowLayout,
    layouts_from_json,
)

from conftest import make_window

pytestmark = pytest.mark.unit


def test_window_layout_to_dict_uses_file_field_names():
    """to_dict emits appName / position{x,y} / size{width,height}."""
    window = make_window("Finder", -10, 25, 800, 600)
    assert window.to_dict() == {
        "appName": "Finder",
        "position": {"x": -10, "y": 25},
        "size": {"width": 800, "height": 600},
    }


def test_layout_from_dict_ignores_field_order_and_extra_keys():
    """Parsing does not depend on key order and tolerates unknown keys."""
    raw = {
        "windows": [
            {
                "size": {"height": 600, "width": 800},
                "position": {"y": 25, "x": 0},
                "appName": "Finder",
                "extra": True,
            }
        ],
        "name": "Work",
    }
    layout = Layout.from_dict(raw)
    assert layout.name == "Work"
    assert layout.windows == (make_window("Finder", 0, 25, 800, 600),)


def test_layout_accepts_list_of_windows_and_stores_tuple():
    """Layout normalises its windows into an immutable tuple."""
    layout = Layout("Work", [make_window("Finder", 0, 0, 10, 10)])
    assert isinstance(layout.windows, tuple)
    assert layout.app_names == ["Finder"]


def test_integral_floats_are_accepted():
    """Whole-number floats (e.g. 100.0) are read back as ints."""
    window = WindowLayout.from_dict(
        {"appName": "A", "position": {"x": 1.0, "y": 2.0}, "size": {"width": 3, "height": 4}}
    )
    assert window.position == Position(1, 2)
    assert window.size == Size(3, 4)


@pytest.mark.parametrize(
    "raw",
    [
        {"position": {"x": 0, "y": 0}, "size": {"width": 1, "height": 1}},
        {"appName": "A", "size": {"width": 1, "height": 1}},
        {"appName": "A", "position": {"x": "0", "y": 0}, "size": {"width": 1, "height": 1}},
        {"appName": "A", "position": {"x": 0, "y": 0}, "size": {"width": True, "height": 1}},
        {"appName": "A", "position": {"x": 0.5, "y": 0}, "size": {"width": 1, "height": 1}},
        {"appName": 3, "position": {"x": 0, "y": 0}, "size": {"width": 1, "height": 1}},
        "not-an-object",
    ],
)
def test_malformed_window_raises(raw):
    """Missing fields or non-integer coordinates raise LayoutFormatError."""
    with pytest.raises(LayoutFormatError):
        WindowLayout.from_dict(raw)


def test_layouts_from_json_requires_array():
    """The top-level document must be a JSON array."""
    with pytest.raises(LayoutFormatError):
        layouts_from_json({"name": "Work", "windows": []})


def test_layout_format_error_is_value_error():
    """Callers catching ValueError also see format errors."""
    assert issubclass(LayoutFormatError, ValueError)


def test_apply_result_summary_counts_entries():
    """ApplyResult reports successes out of the total."""
    w1 = make_window("A", 0, 0, 1, 1)
    w2 = make_window("B", 0, 0, 1, 1)
    result = ApplyResult(
        "Work",
        [
            EntryOutcome(0, w1, ok=True),
            EntryOutcome(1, w2, ok=False, error="gone"),
        ],
    )
    assert result.total == 2
    assert [o.app_name for o in result.succeeded] == ["A"]
    assert [o.app_name for o in result.failed] == ["B"]
    assert result.ok is False
    assert result.summary() == "1 of 2 windows restored"


def test_empty_apply_result_is_ok():
    """A layout without windows applies trivially."""
    result = ApplyResult("Empty")
    assert result.ok is True
    assert result.summary() == "0 of 0 windows restored"


def test_save_result_truthiness():
    """SaveResult is truthy only on success."""
    assert SaveResult(ok=True)
    assert not SaveResult(ok=False, error="disk full")
