"""Deep links that open turn-by-turn navigation to a point."""

from __future__ import annotations

import re

from pyrecyclemap.models import Coordinates

_APPLE_USER_AGENT = re.compile(r"iPad|iPhone|iPod|Macintosh")

APPLE_MAPS_URL = "http://maps.apple.com/?daddr={lat},{lng}"
GOOGLE_MAPS_URL = "https://www.google.com/maps/dir/?api=1&destination={lat},{lng}"


def is_apple_platform(user_agent: str | None) -> bool:
    """Return ``True`` for user agents that should open Apple Maps."""
    if not user_agent:
        return False
    return _APPLE_USER_AGENT.search(user_agent) is not None


def build_navigation_url(coordinates: Coordinates, *, apple: bool) -> str:
    """Build a directions URL: Apple Maps when ``apple`` is set, Google Maps otherwise."""
    template = APPLE_MAPS_URL if apple else GOOGLE_MAPS_URL
    return template.format(lat=coordinates.latitude, lng=coordinates.longitude)
