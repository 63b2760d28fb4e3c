"""Deterministic capacity/status rules.

This module contains no randomness and no registry access. Thresholds
default to the simulator's configured values.
"""

from __future__ import annotations

from pyrecyclemap.models import PointStatus

CAPACITY_MIN = 0
CAPACITY_MAX = 100


def clamp_capacity(value: int) -> int:
    return max(CAPACITY_MIN, min(CAPACITY_MAX, value))


def derive_status(
    current: PointStatus,
    capacity_percent: int,
    *,
    enter_threshold: int = 95,
    exit_threshold: int = 90,
) -> PointStatus:
    """Recompute a machine status from its capacity.

    Policy:
    - ``MAINTENANCE`` is sticky; capacity never moves a point out of it.
    - At or above ``enter_threshold`` the machine is ``FULL``.
    - A ``FULL`` machine returns to ``ONLINE`` only below ``exit_threshold``.
    - Anything else keeps its current status (hysteresis band).
    """
    if current == PointStatus.MAINTENANCE:
        return current
    if capacity_percent >= enter_threshold:
        return PointStatus.FULL
    if current == PointStatus.FULL and capacity_percent < exit_threshold:
        return PointStatus.ONLINE
    return current


def toggle_maintenance(current: PointStatus) -> PointStatus:
    if current == PointStatus.MAINTENANCE:
        return PointStatus.ONLINE
    return PointStatus.MAINTENANCE
