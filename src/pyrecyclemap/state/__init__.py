"""Registry and simulation rules.

The registry is the single source of truth for tracked points. The
rules and the tick function are pure: they take a snapshot and return
a new one, so the same inputs and random draws always produce the same
output.
"""

from pyrecyclemap.state.registry import Registry, capacity_alerts
from pyrecyclemap.state.rules import clamp_capacity, derive_status, toggle_maintenance
from pyrecyclemap.state.tick import advance_point, tick

__all__ = [
    "Registry",
    "advance_point",
    "capacity_alerts",
    "clamp_capacity",
    "derive_status",
    "tick",
    "toggle_maintenance",
]
