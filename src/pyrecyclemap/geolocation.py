"""Viewer position input.

The viewer position comes from the host platform (browser or device
geolocation). This module only consumes it: a provider is any
coroutine function returning a :class:`ViewerPosition`, ``None`` or
raising :class:`GeolocationUnavailableError`.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from pyrecyclemap.exceptions import GeolocationUnavailableError
from pyrecyclemap.models import ViewerPosition

_logger = logging.getLogger(__name__)

PositionProvider = Callable[[], Awaitable[ViewerPosition | None]]


async def read_viewer_position(
    provider: PositionProvider | None,
    *,
    timeout: float | None = None,
) -> ViewerPosition | None:
    """One-shot read of the viewer position.

    Never raises for an unavailable source: a missing provider, a denial,
    an empty answer or a timeout all return ``None``.
    """
    if provider is None:
        return None
    try:
        if timeout is None:
            return await provider()
        return await asyncio.wait_for(provider(), timeout)
    except GeolocationUnavailableError as exc:
        _logger.debug("Geolocation unavailable: %s", exc)
        return None
    except TimeoutError:
        _logger.debug("Geolocation timed out after %ss", timeout)
        return None


class ViewerPositionFeed:
    """Latest known viewer position, last write wins.

    Readers may see a slightly stale value; there is no ordering
    guarantee with respect to simulation ticks.
    """

    def __init__(self, position: ViewerPosition | None = None) -> None:
        self._position = position

    @property
    def latest(self) -> ViewerPosition | None:
        return self._position

    def update(self, position: ViewerPosition | None) -> None:
        self._position = position

    async def refresh(self, provider: PositionProvider | None, *, timeout: float | None = None) -> ViewerPosition | None:
        """Read the provider once; keep the previous value if it has nothing new."""
        position = await read_viewer_position(provider, timeout=timeout)
        if position is not None:
            self._position = position
        return self._position
