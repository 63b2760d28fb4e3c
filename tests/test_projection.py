"""Tests for projection, styling and selection."""

from __future__ import annotations

import pytest

from pyrecyclemap.config import ProjectionConfig
from pyrecyclemap.geolocation import ViewerPositionFeed
from pyrecyclemap.models import (
    Coordinates,
    MapStyle,
    PointKind,
    PointStatus,
    SelectionState,
    StyleTone,
    TrackedPoint,
    ViewerPosition,
)
from pyrecyclemap.projection import MapView, derive_visual_style, describe_capacity, project
from pyrecyclemap.seed import DEFAULT_SEED


def _point(kind: PointKind, status: PointStatus, capacity: int | None = None) -> TrackedPoint:
    return TrackedPoint(
        id="p1",
        name="P",
        kind=kind,
        coordinates=Coordinates(latitude=23.75, longitude=90.35),
        status=status,
        capacity_percent=capacity,
    )


def test_project_uses_default_anchor_without_viewer() -> None:
    projected = dict((point.id, screen) for point, screen in project(DEFAULT_SEED))
    # Gulshan: (23.7925 - 23.7) * 800 = 74, (90.4078 - 90.3) * 800 = 86.24
    assert projected["m1"].top == pytest.approx(124.0)
    assert projected["m1"].left == pytest.approx(136.24)
    assert project(DEFAULT_SEED) == project(DEFAULT_SEED)


def test_project_anchors_on_viewer() -> None:
    viewer = ViewerPosition(latitude=23.7925, longitude=90.4078)
    (_, screen), *_ = project(DEFAULT_SEED, viewer)
    assert screen.top == pytest.approx(50.0)
    assert screen.left == pytest.approx(50.0)


def test_project_respects_config() -> None:
    config = ProjectionConfig(anchor_latitude=23.75, anchor_longitude=90.35, scale_factor=100.0, center=0.0)
    [(_, screen)] = project([_point(PointKind.MACHINE, PointStatus.ONLINE, 10)], None, config)
    assert screen.top == pytest.approx(0.0)
    assert screen.left == pytest.approx(0.0)


def test_project_empty() -> None:
    assert project([]) == []


@pytest.mark.parametrize(
    ("kind", "status", "tone"),
    [
        (PointKind.CENTER, PointStatus.OPEN, StyleTone.CENTER),
        (PointKind.CENTER, PointStatus.UNKNOWN, StyleTone.CENTER),
        (PointKind.MACHINE, PointStatus.ONLINE, StyleTone.GOOD),
        (PointKind.MACHINE, PointStatus.FULL, StyleTone.CRITICAL),
        (PointKind.MACHINE, PointStatus.MAINTENANCE, StyleTone.WARNING),
        (PointKind.MACHINE, PointStatus.UNKNOWN, StyleTone.NEUTRAL),
    ],
)
def test_style_table(kind: PointKind, status: PointStatus, tone: StyleTone) -> None:
    assert derive_visual_style(_point(kind, status, 50)).tone == tone


def test_road_style_has_no_glow() -> None:
    point = _point(PointKind.MACHINE, PointStatus.FULL, 99)
    assert derive_visual_style(point, MapStyle.SATELLITE).glow
    road = derive_visual_style(point, MapStyle.ROAD)
    assert road.glow == ""
    assert road.tone == StyleTone.CRITICAL


def test_describe_capacity() -> None:
    assert describe_capacity(_point(PointKind.CENTER, PointStatus.OPEN)) is None
    assert describe_capacity(_point(PointKind.MACHINE, PointStatus.FULL, 91)) == StyleTone.CRITICAL
    assert describe_capacity(_point(PointKind.MACHINE, PointStatus.MAINTENANCE, 91)) == StyleTone.CRITICAL
    assert describe_capacity(_point(PointKind.MACHINE, PointStatus.MAINTENANCE, 90)) == StyleTone.WARNING
    assert describe_capacity(_point(PointKind.MACHINE, PointStatus.ONLINE, 90)) == StyleTone.GOOD


def test_select_unknown_id_is_noop() -> None:
    view = MapView(DEFAULT_SEED)
    view.select("m2")
    assert view.select("ghost") == SelectionState(point_id="m2")
    assert view.selected_point() == DEFAULT_SEED[1]


def test_clear_selection_is_idempotent() -> None:
    view = MapView(DEFAULT_SEED)
    view.select("c1")
    once = view.clear_selection()
    twice = view.clear_selection()
    assert once == twice == SelectionState()
    assert twice.is_empty
    assert view.selected_point() is None


def test_selection_follows_latest_snapshot() -> None:
    view = MapView(DEFAULT_SEED)
    view.select("m1")
    emptied = DEFAULT_SEED[0].evolve(capacity_percent=0)
    view.update((emptied, *DEFAULT_SEED[1:]))
    assert view.selected_point() == emptied

    view.update(DEFAULT_SEED[1:])
    assert view.selection.point_id == "m1"
    assert view.selected_point() is None
    assert view.detail() is None


def test_render_marks_selection_and_uses_viewer_feed() -> None:
    feed = ViewerPositionFeed(ViewerPosition(latitude=23.8103, longitude=90.3615))
    view = MapView(DEFAULT_SEED, viewer=feed)
    view.select("c1")
    rendered = {item.point.id: item for item in view.render()}
    assert rendered["c1"].selected
    assert not rendered["m1"].selected
    assert rendered["c1"].screen.top == pytest.approx(50.0)
    assert rendered["c1"].style.tone == StyleTone.CENTER


def test_detail_for_selected_machine() -> None:
    view = MapView(DEFAULT_SEED, map_style=MapStyle.ROAD)
    view.select("m2")
    detail = view.detail(apple=True)
    assert detail is not None
    assert detail.capacity_tone == StyleTone.CRITICAL
    assert detail.style.glow == ""
    assert detail.navigation_url == "http://maps.apple.com/?daddr=23.7461,90.3742"
