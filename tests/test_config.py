from __future__ import annotations

import pytest

from pyrecyclemap.config import ProjectionConfig, SimulationConfig
from pyrecyclemap.exceptions import RecycleMapConfigError


def test_defaults() -> None:
    config = SimulationConfig()
    assert config.tick_interval == 2.0
    assert (config.perturbation_min, config.perturbation_max) == (-2, 2)
    assert (config.event_low_value, config.event_high_value) == (15, 98)
    assert (config.full_exit_threshold, config.full_enter_threshold) == (90, 95)
    projection = ProjectionConfig()
    assert (projection.anchor_latitude, projection.anchor_longitude) == (23.7, 90.3)
    assert projection.scale_factor == 800.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tick_interval": 0},
        {"perturbation_min": 3, "perturbation_max": 2},
        {"event_probability": 1.5},
        {"maintenance_toggle_probability": -0.1},
        {"event_high_value": 120},
        {"full_enter_threshold": 85, "full_exit_threshold": 90},
    ],
)
def test_invalid_simulation_config_fails_loudly(kwargs: dict) -> None:
    with pytest.raises(RecycleMapConfigError):
        SimulationConfig(**kwargs)


def test_invalid_projection_config() -> None:
    with pytest.raises(RecycleMapConfigError):
        ProjectionConfig(scale_factor=0)


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RECYCLEMAP_TICK_INTERVAL", "0.5")
    monkeypatch.setenv("RECYCLEMAP_SEED", "7")
    monkeypatch.setenv("RECYCLEMAP_FULL_ENTER_THRESHOLD", "97")
    config = SimulationConfig.from_env(full_exit_threshold=80)
    assert config.tick_interval == 0.5
    assert config.random_seed == 7
    assert config.full_enter_threshold == 97
    assert config.full_exit_threshold == 80


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RECYCLEMAP_TICK_INTERVAL", "not-a-number")
    assert SimulationConfig.from_env(tick_interval=1.0).tick_interval == 1.0
    with pytest.raises(RecycleMapConfigError):
        SimulationConfig.from_env()


def test_projection_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RECYCLEMAP_ANCHOR_LAT", "22.33")
    monkeypatch.setenv("RECYCLEMAP_SCALE", "400")
    config = ProjectionConfig.from_env()
    assert config.anchor_latitude == 22.33
    assert config.anchor_longitude == 90.3
    assert config.scale_factor == 400.0
