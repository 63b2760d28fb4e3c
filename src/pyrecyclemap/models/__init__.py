"""Immutable models for tracked points and their projection."""

from pyrecyclemap.models._base import PointKind, PointStatus, RecycleMapModel
from pyrecyclemap.models.point import Coordinates, TrackedPoint
from pyrecyclemap.models.projection import (
    MapStyle,
    PointDetail,
    ProjectedPoint,
    ScreenCoordinate,
    SelectionState,
    StyleDescriptor,
    StyleTone,
    ViewerPosition,
)

__all__ = [
    "Coordinates",
    "MapStyle",
    "PointDetail",
    "PointKind",
    "PointStatus",
    "ProjectedPoint",
    "RecycleMapModel",
    "ScreenCoordinate",
    "SelectionState",
    "StyleDescriptor",
    "StyleTone",
    "TrackedPoint",
    "ViewerPosition",
]
