"""Pure simulation step."""

from __future__ import annotations

from collections.abc import Iterable

from pyrecyclemap.config import SimulationConfig
from pyrecyclemap.models import PointKind, TrackedPoint
from pyrecyclemap.random_source import RandomSource
from pyrecyclemap.state.rules import clamp_capacity, derive_status, toggle_maintenance


def advance_point(point: TrackedPoint, rng: RandomSource, config: SimulationConfig) -> TrackedPoint:
    """Advance a single point by one tick.

    Draw order per machine is fixed (perturbation, event roll, event side
    when the event fires, maintenance roll) so a scripted random source
    can target each branch. Centers are returned unchanged and consume
    no draws.

    Machines under maintenance still drift in capacity; only their
    status is frozen.
    """
    if point.kind != PointKind.MACHINE:
        return point

    current = point.capacity_percent or 0
    capacity = clamp_capacity(current + rng.randint(config.perturbation_min, config.perturbation_max))

    # Sudden emptying/filling replaces the drift instead of adding to it.
    if rng.random() < config.event_probability:
        capacity = config.event_high_value if rng.random() >= 0.5 else config.event_low_value

    status = derive_status(
        point.status,
        capacity,
        enter_threshold=config.full_enter_threshold,
        exit_threshold=config.full_exit_threshold,
    )

    if rng.random() < config.maintenance_toggle_probability:
        status = toggle_maintenance(status)

    return point.evolve(capacity_percent=capacity, status=status)


def tick(points: Iterable[TrackedPoint], rng: RandomSource, config: SimulationConfig) -> tuple[TrackedPoint, ...]:
    """Advance every point by one tick and return the new snapshot."""
    return tuple(advance_point(point, rng, config) for point in points)
