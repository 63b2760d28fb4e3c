"""Render-ready projection models."""

from __future__ import annotations

from enum import StrEnum

from pyrecyclemap.models._base import RecycleMapModel
from pyrecyclemap.models.point import Coordinates, TrackedPoint


class ViewerPosition(Coordinates):
    """The viewer's own position, as reported by a location provider.

    ``accuracy_m`` is optional and only informational.
    """

    accuracy_m: float | None = None


class StyleTone(StrEnum):
    CENTER = "center"
    GOOD = "good"
    CRITICAL = "critical"
    WARNING = "warning"
    NEUTRAL = "neutral"


class MapStyle(StrEnum):
    ROAD = "road"
    SATELLITE = "satellite"


class StyleDescriptor(RecycleMapModel):
    """Colour tokens for one marker.

    ``glow`` is empty for the neutral style and for the road map style.
    """

    tone: StyleTone
    color: str
    background: str
    ring: str
    glow: str = ""


class ScreenCoordinate(RecycleMapModel):
    """Marker position in percent of the viewport (``50/50`` is the centre)."""

    top: float
    left: float


class ProjectedPoint(RecycleMapModel):
    point: TrackedPoint
    screen: ScreenCoordinate
    style: StyleDescriptor
    selected: bool = False


class SelectionState(RecycleMapModel):
    """At most one selected point id."""

    point_id: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.point_id is None


class PointDetail(RecycleMapModel):
    """Data behind the detail card of the selected point.

    ``capacity_tone`` is ``None`` for centers, which have no capacity bar.
    """

    point: TrackedPoint
    style: StyleDescriptor
    capacity_tone: StyleTone | None = None
    navigation_url: str
