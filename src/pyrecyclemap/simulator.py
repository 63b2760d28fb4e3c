"""Live map simulator: owns the registry and serializes every mutation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable
from typing import Any

from pyrecyclemap.config import SimulationConfig
from pyrecyclemap.exceptions import PointKindError
from pyrecyclemap.models import PointStatus, TrackedPoint
from pyrecyclemap.random_source import RandomSource, create_random_source
from pyrecyclemap.scheduler import AsyncioTickScheduler, TickScheduler
from pyrecyclemap.seed import DEFAULT_SEED
from pyrecyclemap.state.registry import Registry
from pyrecyclemap.state.rules import derive_status
from pyrecyclemap.state.tick import tick as _tick

_logger = logging.getLogger(__name__)

Snapshot = tuple[TrackedPoint, ...]
SnapshotListener = Callable[[Snapshot], None]


class Simulator:
    """Synthetic feed that advances machine capacity and status over time.

    Ticks and administrative edits all go through one lock, so they
    interleave only at tick/edit boundaries. Listeners receive the new
    snapshot after every committed change.

    Usage::

        async with Simulator(config=SimulationConfig(random_seed=7)) as sim:
            sim.subscribe(view.update)
            ...
    """

    def __init__(
        self,
        seed: Iterable[TrackedPoint] | None = None,
        *,
        config: SimulationConfig | None = None,
        rng: RandomSource | None = None,
        scheduler: TickScheduler | None = None,
    ) -> None:
        self._config = config if config is not None else SimulationConfig()
        self._registry = Registry.initialize(DEFAULT_SEED if seed is None else seed)
        self._rng = rng if rng is not None else create_random_source(self._config.random_seed)
        self._scheduler = scheduler if scheduler is not None else AsyncioTickScheduler(self._config.tick_interval)
        self._lock = asyncio.Lock()
        self._listeners: list[SnapshotListener] = []
        self._running = False
        self._generation = 0
        self._last_error: BaseException | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> Simulator:
        await self.start()
        return self

    async def __aexit__(self, exc_type: type[BaseException] | None, *exc: Any) -> None:
        if exc_type is None:
            await self.stop()
            return
        # Keep the exception that ended the block; a tick error is only logged here.
        try:
            await self.stop()
        except Exception:
            _logger.exception("Simulation stop failed while handling %s", exc_type.__name__)

    async def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._last_error = None
        await self._scheduler.start(self._scheduled_tick)
        _logger.info("Simulation started with %d points", len(self._registry))

    async def stop(self) -> None:
        """Stop ticking. A tick that has not yet committed is discarded.

        Re-raises the error of a scheduled tick that failed since the last
        :meth:`start`, unless the simulation was restarted in between.
        """
        was_running = self._running
        self._running = False
        await self._scheduler.stop()
        if was_running:
            _logger.info("Simulation stopped at generation %d", self._generation)

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def last_error(self) -> BaseException | None:
        """Error that stopped scheduled ticking, if any."""
        return self._last_error

    @property
    def generation(self) -> int:
        """Number of committed ticks."""
        return self._generation

    @property
    def registry(self) -> Registry:
        return self._registry

    # ------------------------------------------------------------------
    # Reads and subscriptions
    # ------------------------------------------------------------------

    def current_snapshot(self) -> Snapshot:
        return self._registry.snapshot()

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a snapshot listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _publish(self, snapshot: Snapshot) -> None:
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                _logger.exception("Snapshot listener %r failed", listener)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def tick(self) -> Registry:
        """Apply one simulation step to the whole registry."""
        async with self._lock:
            registry = self._commit_tick()
        self._publish(registry.snapshot())
        return registry

    async def _scheduled_tick(self) -> None:
        async with self._lock:
            # Stopped while waiting for the lock: drop the tick.
            if not self._running:
                return
            try:
                registry = self._commit_tick()
            except Exception as exc:
                self._running = False
                self._last_error = exc
                raise
        self._publish(registry.snapshot())

    def _commit_tick(self) -> Registry:
        self._registry = self._registry.with_points(_tick(self._registry, self._rng, self._config))
        self._generation += 1
        _logger.debug("Tick %d committed", self._generation)
        return self._registry

    async def set_maintenance(self, point_id: str, active: bool) -> TrackedPoint:
        """Put a machine into maintenance or bring it back online.

        Raises
        ------
        UnknownPointIdError
            No point with ``point_id``; nothing changed.
        PointKindError
            ``point_id`` is a center.
        """
        async with self._lock:
            point = self._require_machine(point_id)
            if active:
                status = PointStatus.MAINTENANCE
            elif point.status == PointStatus.MAINTENANCE:
                status = PointStatus.ONLINE
            else:
                status = point.status
            if status == point.status:
                return point
            updated = point.evolve(status=status)
            self._registry = self._registry.with_point(updated)
            snapshot = self._registry.snapshot()
        _logger.info("Point %s maintenance=%s", point_id, active)
        self._publish(snapshot)
        return updated

    async def empty(self, point_id: str) -> TrackedPoint:
        """Record a collection run: capacity drops to zero.

        A full machine goes back online; maintenance is left as is.
        """
        async with self._lock:
            point = self._require_machine(point_id)
            status = derive_status(
                point.status,
                0,
                enter_threshold=self._config.full_enter_threshold,
                exit_threshold=self._config.full_exit_threshold,
            )
            updated = point.evolve(capacity_percent=0, status=status)
            self._registry = self._registry.with_point(updated)
            snapshot = self._registry.snapshot()
        _logger.info("Point %s emptied (was %s%%)", point_id, point.capacity_percent)
        self._publish(snapshot)
        return updated

    async def remove(self, point_id: str) -> TrackedPoint:
        """Remove a point from the registry. Returns the removed point."""
        async with self._lock:
            point = self._registry.require(point_id)
            self._registry = self._registry.without(point_id)
            snapshot = self._registry.snapshot()
        _logger.info("Point %s removed", point_id)
        self._publish(snapshot)
        return point

    def _require_machine(self, point_id: str) -> TrackedPoint:
        point = self._registry.require(point_id)
        if not point.is_machine:
            raise PointKindError(point_id)
        return point
