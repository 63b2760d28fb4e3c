"""Tracked point model (vending machines and collection centers)."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator, model_validator

from pyrecyclemap.models._base import PointKind, PointStatus, RecycleMapModel

_FLAT_COORDINATE_KEYS = ("lat", "lng", "lon", "latitude", "longitude")

# UNKNOWN is accepted for both kinds and renders with the fallback style.
_ALLOWED_STATUSES: dict[PointKind, frozenset[PointStatus]] = {
    PointKind.MACHINE: frozenset({PointStatus.ONLINE, PointStatus.FULL, PointStatus.MAINTENANCE, PointStatus.UNKNOWN}),
    PointKind.CENTER: frozenset({PointStatus.OPEN, PointStatus.UNKNOWN}),
}


class Coordinates(RecycleMapModel):
    """Latitude/longitude pair in decimal degrees."""

    latitude: float = Field(ge=-90.0, le=90.0, validation_alias=AliasChoices("latitude", "lat"))
    longitude: float = Field(
        ge=-180.0,
        le=180.0,
        validation_alias=AliasChoices("longitude", "lng", "lon"),
    )


class TrackedPoint(RecycleMapModel):
    """A stationary device or facility shown on the live map.

    Parameters
    ----------
    id : str
        Unique, stable identifier.
    name : str
        Display label.
    kind : PointKind
        ``MACHINE`` or ``CENTER``. Never changes.
    coordinates : Coordinates
        Position of the point. Points are stationary.
    status : PointStatus
        Current operational status. Centers are ``OPEN``; machines are
        ``ONLINE``, ``FULL`` or ``MAINTENANCE``. ``UNKNOWN`` is accepted
        for either kind.
    capacity_percent : int or None
        Fill level in ``[0, 100]`` for machines; always ``None`` for
        centers. A machine created without a value starts at ``0``.
    address : str
        Free-text address.
    """

    id: str
    name: str
    kind: PointKind = Field(validation_alias=AliasChoices("kind", "type"))
    coordinates: Coordinates
    status: PointStatus
    capacity_percent: int | None = Field(
        default=None,
        ge=0,
        le=100,
        validation_alias=AliasChoices("capacity_percent", "capacityPercent", "capacity"),
    )
    address: str = ""

    @model_validator(mode="before")
    @classmethod
    def _lift_flat_coordinates(cls, values: Any) -> Any:
        """Accept the flat ``lat``/``lng`` layout used by the web app."""
        if not isinstance(values, dict) or "coordinates" in values:
            return values
        if not any(key in values for key in _FLAT_COORDINATE_KEYS):
            return values
        merged = dict(values)
        merged["coordinates"] = {key: merged.pop(key) for key in _FLAT_COORDINATE_KEYS if key in merged}
        return merged

    @field_validator("id")
    @classmethod
    def _normalize_id(cls, value: str) -> str:
        point_id = value.strip()
        if not point_id:
            raise ValueError("id must be non-empty")
        return point_id

    @model_validator(mode="after")
    def _check_status_for_kind(self) -> TrackedPoint:
        if self.status not in _ALLOWED_STATUSES[self.kind]:
            raise ValueError(f"status {self.status.value} is not valid for a {self.kind.value.lower()}")
        return self

    @model_validator(mode="after")
    def _normalize_capacity(self) -> TrackedPoint:
        if self.kind == PointKind.CENTER and self.capacity_percent is not None:
            object.__setattr__(self, "capacity_percent", None)
        elif self.kind == PointKind.MACHINE and self.capacity_percent is None:
            object.__setattr__(self, "capacity_percent", 0)
        return self

    @property
    def is_machine(self) -> bool:
        return self.kind == PointKind.MACHINE

    def evolve(self, *, capacity_percent: int | None = None, status: PointStatus | None = None) -> TrackedPoint:
        """Return a copy with new capacity and/or status.

        Identity fields (id, kind, coordinates, address) are never touched.
        """
        update: dict[str, Any] = {}
        if capacity_percent is not None:
            update["capacity_percent"] = capacity_percent
        if status is not None:
            update["status"] = status
        if not update:
            return self
        return self.model_copy(update=update)
