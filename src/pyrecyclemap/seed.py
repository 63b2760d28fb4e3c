"""Default seed points and seed file loading."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter

from pyrecyclemap.models import TrackedPoint

_SEED_ADAPTER = TypeAdapter(list[TrackedPoint])

# Demo network in Dhaka, in the flat layout the web app exports.
_DEFAULT_SEED_RAW = [
    {
        "id": "m1",
        "name": "Gulshan 1 Vending Station",
        "type": "MACHINE",
        "lat": 23.7925,
        "lng": 90.4078,
        "status": "ONLINE",
        "address": "Gulshan Ave, Dhaka",
        "capacity": 45,
    },
    {
        "id": "m2",
        "name": "Dhanmondi Lake Point",
        "type": "MACHINE",
        "lat": 23.7461,
        "lng": 90.3742,
        "status": "FULL",
        "address": "Lake View Rd, Dhaka",
        "capacity": 98,
    },
    {
        "id": "c1",
        "name": "Mirpur Central Collection",
        "type": "CENTER",
        "lat": 23.8103,
        "lng": 90.3615,
        "status": "OPEN",
        "address": "Sec 10, Mirpur",
    },
    {
        "id": "m3",
        "name": "Banani Supermarket",
        "type": "MACHINE",
        "lat": 23.7940,
        "lng": 90.4043,
        "status": "MAINTENANCE",
        "address": "Banani Bazar",
        "capacity": 0,
    },
]

DEFAULT_SEED: tuple[TrackedPoint, ...] = tuple(_SEED_ADAPTER.validate_python(_DEFAULT_SEED_RAW))


def load_seed(path: str | Path) -> list[TrackedPoint]:
    """Load seed points from a JSON array (flat or nested coordinates)."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return _SEED_ADAPTER.validate_python(data)
