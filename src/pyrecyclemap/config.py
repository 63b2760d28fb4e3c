"""Simulation and projection configuration for pyrecyclemap."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any

from pyrecyclemap.exceptions import RecycleMapConfigError


def _env_number(env: Mapping[str, str], key: str, cast: type[int] | type[float]) -> Any:
    raw = env.get(key)
    if raw is None:
        return None
    try:
        return cast(raw.strip())
    except ValueError as exc:
        raise RecycleMapConfigError(f"{key} must be a {cast.__name__}, got {raw!r}") from exc


@dataclasses.dataclass(frozen=True)
class SimulationConfig:
    """Rules and cadence of the capacity simulation.

    The default numbers are the ones the live map has always shipped
    with; they are kept as configuration rather than re-derived.

    Parameters
    ----------
    tick_interval : float
        Seconds between two ticks. Defaults to ``2.0``.
    perturbation_min : int
        Lower bound (inclusive) of the per-tick capacity change.
    perturbation_max : int
        Upper bound (inclusive) of the per-tick capacity change.
    event_probability : float
        Chance per machine and tick that the capacity jumps to
        ``event_low_value`` or ``event_high_value`` instead of drifting.
    event_low_value : int
        Capacity after a sudden emptying.
    event_high_value : int
        Capacity after a sudden filling.
    full_enter_threshold : int
        Capacity at or above which a machine becomes ``FULL``.
    full_exit_threshold : int
        Capacity below which a ``FULL`` machine returns to ``ONLINE``.
    maintenance_toggle_probability : float
        Chance per machine and tick that the maintenance flag flips.
    random_seed : int or None
        Seed for the default random source. ``None`` seeds from the OS.
    """

    tick_interval: float = 2.0
    perturbation_min: int = -2
    perturbation_max: int = 2
    event_probability: float = 0.02
    event_low_value: int = 15
    event_high_value: int = 98
    full_enter_threshold: int = 95
    full_exit_threshold: int = 90
    maintenance_toggle_probability: float = 0.005
    random_seed: int | None = None

    def __post_init__(self) -> None:
        if self.tick_interval <= 0:
            raise RecycleMapConfigError("tick_interval must be positive")
        if self.perturbation_min > self.perturbation_max:
            raise RecycleMapConfigError("perturbation_min must not exceed perturbation_max")
        for name in ("event_probability", "maintenance_toggle_probability"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise RecycleMapConfigError(f"{name} must be within [0, 1], got {value}")
        for name in ("event_low_value", "event_high_value", "full_enter_threshold", "full_exit_threshold"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise RecycleMapConfigError(f"{name} must be within [0, 100], got {value}")
        if self.full_exit_threshold > self.full_enter_threshold:
            raise RecycleMapConfigError("full_exit_threshold must not exceed full_enter_threshold")

    @classmethod
    def from_env(cls, **overrides: Any) -> SimulationConfig:
        """Create configuration from ``RECYCLEMAP_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        _ENV_CONFIG_MAP: dict[str, tuple[str, type[int] | type[float]]] = {
            "RECYCLEMAP_TICK_INTERVAL": ("tick_interval", float),
            "RECYCLEMAP_PERTURBATION_MIN": ("perturbation_min", int),
            "RECYCLEMAP_PERTURBATION_MAX": ("perturbation_max", int),
            "RECYCLEMAP_EVENT_PROBABILITY": ("event_probability", float),
            "RECYCLEMAP_EVENT_LOW_VALUE": ("event_low_value", int),
            "RECYCLEMAP_EVENT_HIGH_VALUE": ("event_high_value", int),
            "RECYCLEMAP_FULL_ENTER_THRESHOLD": ("full_enter_threshold", int),
            "RECYCLEMAP_FULL_EXIT_THRESHOLD": ("full_exit_threshold", int),
            "RECYCLEMAP_MAINTENANCE_PROBABILITY": ("maintenance_toggle_probability", float),
            "RECYCLEMAP_SEED": ("random_seed", int),
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, (field_name, cast) in _ENV_CONFIG_MAP.items():
            if field_name in overrides:
                continue
            value = _env_number(env, env_key, cast)
            if value is not None:
                config_kwargs[field_name] = value

        config_kwargs.update(overrides)
        return cls(**config_kwargs)


@dataclasses.dataclass(frozen=True)
class ProjectionConfig:
    """Linear map projection settings.

    Parameters
    ----------
    anchor_latitude : float
        Latitude placed at the viewport centre when the viewer position
        is unknown.
    anchor_longitude : float
        Longitude placed at the viewport centre when the viewer position
        is unknown.
    scale_factor : float
        Percent of viewport per degree. ``800`` spreads city-scale
        deltas (a few hundredths of a degree) across the screen.
    center : float
        Viewport centre in percent.
    """

    anchor_latitude: float = 23.7
    anchor_longitude: float = 90.3
    scale_factor: float = 800.0
    center: float = 50.0

    def __post_init__(self) -> None:
        if self.scale_factor <= 0:
            raise RecycleMapConfigError("scale_factor must be positive")

    @classmethod
    def from_env(cls, **overrides: Any) -> ProjectionConfig:
        """Create configuration from ``RECYCLEMAP_ANCHOR_*`` / ``RECYCLEMAP_SCALE``."""
        env = os.environ
        _ENV_CONFIG_MAP = {
            "RECYCLEMAP_ANCHOR_LAT": "anchor_latitude",
            "RECYCLEMAP_ANCHOR_LNG": "anchor_longitude",
            "RECYCLEMAP_SCALE": "scale_factor",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            if field_name in overrides:
                continue
            value = _env_number(env, env_key, float)
            if value is not None:
                config_kwargs[field_name] = value

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
