"""Custom exception hierarchy for pyrecyclemap."""

from __future__ import annotations


class RecycleMapError(Exception):
    """Base exception for all pyrecyclemap errors."""


class RecycleMapConfigError(RecycleMapError):
    """Invalid simulation or projection configuration."""


class DuplicateIdentifierError(RecycleMapError):
    """Seed data contains the same point id more than once.

    Raised while initializing a registry. This is a data integrity
    violation and is not recoverable by the simulator.
    """

    def __init__(self, point_id: str) -> None:
        self.point_id = point_id
        super().__init__(f"Duplicate point id in seed data: {point_id!r}")


class UnknownPointIdError(RecycleMapError):
    """A command referenced a point id that is not in the registry.

    Administrative commands raise this so callers know nothing changed.
    Selection treats the same condition as a silent no-op.
    """

    def __init__(self, point_id: str) -> None:
        self.point_id = point_id
        super().__init__(f"Unknown point id: {point_id!r}")


class GeolocationUnavailableError(RecycleMapError):
    """The viewer position source is absent or access was denied."""


class PointKindError(RecycleMapError):
    """A machine-only command was sent to a collection center."""

    def __init__(self, point_id: str) -> None:
        self.point_id = point_id
        super().__init__(f"Point {point_id!r} is not a machine")
