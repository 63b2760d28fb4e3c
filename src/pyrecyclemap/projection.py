"""Spatial projection, styling and selection for the live map.

The projection is a plain linear transform::

    top  = center + (lat - anchor_lat) * scale_factor
    left = center + (lng - anchor_lng) * scale_factor

It is not a geodesic (or even Mercator) projection and is not meant to
be: it only has to spread city-scale points across the viewport in a
stable way. Larger latitudes move markers *down* the screen, matching
what the map view has always rendered.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pyrecyclemap.config import ProjectionConfig
from pyrecyclemap.geolocation import ViewerPositionFeed
from pyrecyclemap.models import (
    Coordinates,
    MapStyle,
    PointDetail,
    PointKind,
    PointStatus,
    ProjectedPoint,
    ScreenCoordinate,
    SelectionState,
    StyleDescriptor,
    StyleTone,
    TrackedPoint,
    ViewerPosition,
)
from pyrecyclemap.navigation import build_navigation_url

_logger = logging.getLogger(__name__)

CENTER_STYLE = StyleDescriptor(
    tone=StyleTone.CENTER,
    color="#3B82F6",
    background="#3B82F6",
    ring="#93C5FD",
    glow="rgba(59,130,246,0.6)",
)
NEUTRAL_STYLE = StyleDescriptor(tone=StyleTone.NEUTRAL, color="#9CA3AF", background="#9CA3AF", ring="#E5E7EB")

_MACHINE_STYLES: dict[PointStatus, StyleDescriptor] = {
    PointStatus.ONLINE: StyleDescriptor(
        tone=StyleTone.GOOD,
        color="#4ADE80",
        background="#22C55E",
        ring="#86EFAC",
        glow="rgba(74,222,128,0.6)",
    ),
    PointStatus.FULL: StyleDescriptor(
        tone=StyleTone.CRITICAL,
        color="#EF4444",
        background="#EF4444",
        ring="#FCA5A5",
        glow="rgba(239,68,68,0.6)",
    ),
    PointStatus.MAINTENANCE: StyleDescriptor(
        tone=StyleTone.WARNING,
        color="#FB923C",
        background="#F97316",
        ring="#FDBA74",
        glow="rgba(251,146,60,0.6)",
    ),
}

# Capacity bar turns critical strictly above this value.
CAPACITY_CRITICAL_ABOVE = 90


def derive_visual_style(point: TrackedPoint, map_style: MapStyle = MapStyle.SATELLITE) -> StyleDescriptor:
    """Map ``(kind, status)`` to marker colours.

    Centers always get the center style. Unrecognised combinations get
    the neutral style. Glow is a satellite-only effect.
    """
    if point.kind == PointKind.CENTER:
        style = CENTER_STYLE
    else:
        style = _MACHINE_STYLES.get(point.status, NEUTRAL_STYLE)
    if map_style == MapStyle.ROAD and style.glow:
        return style.model_copy(update={"glow": ""})
    return style


def describe_capacity(point: TrackedPoint) -> StyleTone | None:
    """Tone of the capacity bar on the detail card; ``None`` for centers."""
    if point.kind != PointKind.MACHINE:
        return None
    if (point.capacity_percent or 0) > CAPACITY_CRITICAL_ABOVE:
        return StyleTone.CRITICAL
    if point.status == PointStatus.MAINTENANCE:
        return StyleTone.WARNING
    return StyleTone.GOOD


def anchor_for(viewer: ViewerPosition | None, config: ProjectionConfig) -> Coordinates:
    if viewer is None:
        return Coordinates(latitude=config.anchor_latitude, longitude=config.anchor_longitude)
    return viewer


def to_screen(coordinates: Coordinates, anchor: Coordinates, config: ProjectionConfig) -> ScreenCoordinate:
    return ScreenCoordinate(
        top=config.center + (coordinates.latitude - anchor.latitude) * config.scale_factor,
        left=config.center + (coordinates.longitude - anchor.longitude) * config.scale_factor,
    )


def project(
    points: Iterable[TrackedPoint],
    viewer: ViewerPosition | None = None,
    config: ProjectionConfig | None = None,
) -> list[tuple[TrackedPoint, ScreenCoordinate]]:
    """Compute a screen position for every point.

    Anchored on the viewer when known, otherwise on the configured
    default anchor. Never fails for a missing viewer position.
    """
    cfg = config if config is not None else ProjectionConfig()
    anchor = anchor_for(viewer, cfg)
    return [(point, to_screen(point.coordinates, anchor, cfg)) for point in points]


class MapView:
    """Presentation state of the live map.

    Holds the latest snapshot, the viewer position feed, the map style
    and the current selection. Subscribe :meth:`update` to a simulator
    to keep it current; the simulator never touches the selection.
    """

    def __init__(
        self,
        points: Iterable[TrackedPoint] = (),
        *,
        viewer: ViewerPositionFeed | None = None,
        config: ProjectionConfig | None = None,
        map_style: MapStyle = MapStyle.SATELLITE,
    ) -> None:
        self._points: tuple[TrackedPoint, ...] = tuple(points)
        self._viewer = viewer if viewer is not None else ViewerPositionFeed()
        self._config = config if config is not None else ProjectionConfig()
        self._selection = SelectionState()
        self.map_style = map_style

    @property
    def points(self) -> tuple[TrackedPoint, ...]:
        return self._points

    @property
    def viewer(self) -> ViewerPositionFeed:
        return self._viewer

    @property
    def selection(self) -> SelectionState:
        return self._selection

    def update(self, snapshot: Iterable[TrackedPoint]) -> None:
        """Receive a new snapshot. The selection is kept even if its point disappeared."""
        self._points = tuple(snapshot)

    def select(self, point_id: str) -> SelectionState:
        """Select ``point_id`` if it is in the current snapshot; otherwise do nothing."""
        if any(point.id == point_id for point in self._points):
            self._selection = SelectionState(point_id=point_id)
        else:
            _logger.debug("Ignoring selection of unknown point %s", point_id)
        return self._selection

    def clear_selection(self) -> SelectionState:
        self._selection = SelectionState()
        return self._selection

    def selected_point(self) -> TrackedPoint | None:
        """Latest state of the selected point, or ``None`` if it is gone."""
        point_id = self._selection.point_id
        if point_id is None:
            return None
        return next((point for point in self._points if point.id == point_id), None)

    def render(self) -> list[ProjectedPoint]:
        selected_id = self._selection.point_id
        return [
            ProjectedPoint(
                point=point,
                screen=screen,
                style=derive_visual_style(point, self.map_style),
                selected=point.id == selected_id,
            )
            for point, screen in project(self._points, self._viewer.latest, self._config)
        ]

    def detail(self, *, apple: bool = False) -> PointDetail | None:
        """Detail card data for the selected point, or ``None`` without a selection."""
        point = self.selected_point()
        if point is None:
            return None
        return PointDetail(
            point=point,
            style=derive_visual_style(point, self.map_style),
            capacity_tone=describe_capacity(point),
            navigation_url=build_navigation_url(point.coordinates, apple=apple),
        )
