from __future__ import annotations

import pytest

from pyrecyclemap.models import PointStatus
from pyrecyclemap.state.rules import clamp_capacity, derive_status, toggle_maintenance


@pytest.mark.parametrize(("value", "expected"), [(-5, 0), (0, 0), (57, 57), (100, 100), (130, 100)])
def test_clamp_capacity(value: int, expected: int) -> None:
    assert clamp_capacity(value) == expected


def test_enters_full_at_threshold() -> None:
    assert derive_status(PointStatus.ONLINE, 95) == PointStatus.FULL
    assert derive_status(PointStatus.ONLINE, 94) == PointStatus.ONLINE


def test_full_is_kept_inside_hysteresis_band() -> None:
    assert derive_status(PointStatus.FULL, 91) == PointStatus.FULL
    assert derive_status(PointStatus.FULL, 90) == PointStatus.FULL
    assert derive_status(PointStatus.FULL, 89) == PointStatus.ONLINE


def test_maintenance_is_sticky() -> None:
    assert derive_status(PointStatus.MAINTENANCE, 100) == PointStatus.MAINTENANCE
    assert derive_status(PointStatus.MAINTENANCE, 0) == PointStatus.MAINTENANCE


def test_custom_thresholds() -> None:
    assert derive_status(PointStatus.ONLINE, 80, enter_threshold=80, exit_threshold=70) == PointStatus.FULL
    assert derive_status(PointStatus.FULL, 75, enter_threshold=80, exit_threshold=70) == PointStatus.FULL
    assert derive_status(PointStatus.FULL, 69, enter_threshold=80, exit_threshold=70) == PointStatus.ONLINE


def test_toggle_maintenance() -> None:
    assert toggle_maintenance(PointStatus.MAINTENANCE) == PointStatus.ONLINE
    assert toggle_maintenance(PointStatus.ONLINE) == PointStatus.MAINTENANCE
    assert toggle_maintenance(PointStatus.FULL) == PointStatus.MAINTENANCE
