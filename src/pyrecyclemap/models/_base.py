"""Base model and enums shared by all pyrecyclemap models.

Every model inherits from :class:`RecycleMapModel` which provides:

* ``frozen=True`` so snapshots handed to callers cannot be mutated.
* ``alias_generator=to_camel`` so camelCase payloads exported by the
  web app (``capacityPercent``) map to snake_case fields.

Status strings without a mapped member resolve to
:attr:`PointStatus.UNKNOWN` instead of raising, so unexpected values
render with the fallback style.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PointKind(StrEnum):
    """What a tracked point is. Fixed at creation."""

    MACHINE = "MACHINE"
    CENTER = "CENTER"


class PointStatus(StrEnum):
    """Operational status of a tracked point.

    ``OPEN`` only applies to centers. Machines cycle among ``ONLINE``,
    ``FULL`` and ``MAINTENANCE``.
    """

    ONLINE = "ONLINE"
    FULL = "FULL"
    MAINTENANCE = "MAINTENANCE"
    OPEN = "OPEN"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value: object) -> PointStatus:
        if isinstance(value, str):
            normalized = value.strip().upper()
            for member in cls:
                if member.value == normalized:
                    return member
        return cls.UNKNOWN


class RecycleMapModel(BaseModel):
    """Base for immutable pyrecyclemap models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
