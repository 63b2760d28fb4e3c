"""Immutable, ordered registry of tracked points."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pyrecyclemap.exceptions import DuplicateIdentifierError, UnknownPointIdError
from pyrecyclemap.models import PointKind, TrackedPoint


class Registry:
    """Ordered collection of tracked points keyed by id.

    Every mutating method returns a new registry; existing instances
    (and the snapshots taken from them) never change.
    """

    __slots__ = ("_index", "_points")

    def __init__(self, points: tuple[TrackedPoint, ...] = ()) -> None:
        index: dict[str, int] = {}
        for position, point in enumerate(points):
            if point.id in index:
                raise DuplicateIdentifierError(point.id)
            index[point.id] = position
        self._points = points
        self._index = index

    @classmethod
    def initialize(cls, seed: Iterable[TrackedPoint]) -> Registry:
        """Load a fixed starting list, rejecting duplicate ids."""
        return cls(tuple(seed))

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[TrackedPoint]:
        return iter(self._points)

    def __contains__(self, point_id: object) -> bool:
        return point_id in self._index

    def __repr__(self) -> str:
        return f"Registry({len(self._points)} points)"

    def snapshot(self) -> tuple[TrackedPoint, ...]:
        return self._points

    def get(self, point_id: str) -> TrackedPoint | None:
        position = self._index.get(point_id)
        if position is None:
            return None
        return self._points[position]

    def require(self, point_id: str) -> TrackedPoint:
        point = self.get(point_id)
        if point is None:
            raise UnknownPointIdError(point_id)
        return point

    def with_points(self, points: Iterable[TrackedPoint]) -> Registry:
        """Replace the whole snapshot, keeping ids and order."""
        updated = tuple(points)
        if [p.id for p in updated] != [p.id for p in self._points]:
            raise ValueError("a tick must not add, remove or reorder points")
        return Registry(updated)

    def with_point(self, point: TrackedPoint) -> Registry:
        position = self._index.get(point.id)
        if position is None:
            raise UnknownPointIdError(point.id)
        points = list(self._points)
        points[position] = point
        return Registry(tuple(points))

    def without(self, point_id: str) -> Registry:
        if point_id not in self._index:
            raise UnknownPointIdError(point_id)
        return Registry(tuple(p for p in self._points if p.id != point_id))


def capacity_alerts(points: Iterable[TrackedPoint], threshold: int = 80) -> list[TrackedPoint]:
    """Machines at or above ``threshold`` percent, fullest first."""
    alerts = [
        point
        for point in points
        if point.kind == PointKind.MACHINE and (point.capacity_percent or 0) >= threshold
    ]
    alerts.sort(key=lambda point: point.capacity_percent or 0, reverse=True)
    return alerts
