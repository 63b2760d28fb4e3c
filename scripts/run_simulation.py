#!/usr/bin/env python3
"""Run the live map simulation in a terminal.

Prints every machine's capacity and status after each tick, plus the
projected screen position of every point.

Usage
-----
::

    python scripts/run_simulation.py --ticks 20 --interval 0.5
    RECYCLEMAP_SEED=7 python scripts/run_simulation.py --json

Options::

    --ticks N           Stop after N ticks (0 = run until Ctrl+C)
    --interval SEC      Seconds between ticks (overrides RECYCLEMAP_TICK_INTERVAL)
    --seed-file FILE    Load points from a JSON array instead of the demo seed
    --viewer LAT,LNG    Anchor the projection on this viewer position
    --apple             Print Apple Maps links instead of Google Maps links
    --json              Output snapshots as JSON lines
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyrecyclemap import (  # noqa: E402
    MapView,
    RecycleMapError,
    SimulationConfig,
    Simulator,
    TrackedPoint,
    ViewerPosition,
    build_navigation_url,
    capacity_alerts,
    load_seed,
)

_LOG = logging.getLogger("run_simulation")


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the live map capacity simulation.")
    parser.add_argument("--ticks", type=int, default=10, help="Number of ticks (0 = run until Ctrl+C).")
    parser.add_argument("--interval", type=float, default=None, help="Seconds between ticks.")
    parser.add_argument("--seed-file", type=Path, default=None, help="JSON file with seed points.")
    parser.add_argument("--viewer", default=None, help="Viewer position as LAT,LNG.")
    parser.add_argument("--apple", action="store_true", help="Print Apple Maps navigation links.")
    parser.add_argument("--json", action="store_true", help="Print snapshots as JSON lines.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logs.")
    return parser.parse_args()


def _parse_viewer(value: str | None) -> ViewerPosition | None:
    if not value:
        return None
    lat_text, _, lng_text = value.partition(",")
    return ViewerPosition(latitude=float(lat_text), longitude=float(lng_text))


def _print_snapshot(view: MapView, generation: int, *, as_json: bool, apple: bool) -> None:
    rendered = view.render()
    if as_json:
        print(
            json.dumps(
                {
                    "generation": generation,
                    "points": [item.model_dump(mode="json") for item in rendered],
                }
            )
        )
        return

    print(f"\n--- tick {generation} ---")
    for item in rendered:
        point = item.point
        capacity = "   -" if point.capacity_percent is None else f"{point.capacity_percent:3d}%"
        print(
            f"  {point.id:<6} {point.status.value:<12} {capacity}  "
            f"top={item.screen.top:7.1f} left={item.screen.left:7.1f}  {point.name}"
        )
    for alert in capacity_alerts(view.points):
        url = build_navigation_url(alert.coordinates, apple=apple)
        print(f"  ! {alert.name} at {alert.capacity_percent}% -> {url}")


async def _run(args: argparse.Namespace, seed: list[TrackedPoint] | None) -> None:
    overrides = {} if args.interval is None else {"tick_interval": args.interval}
    config = SimulationConfig.from_env(**overrides)

    view = MapView()
    view.viewer.update(_parse_viewer(args.viewer))

    done = asyncio.Event()
    simulator = Simulator(seed, config=config)
    view.update(simulator.current_snapshot())

    def _on_snapshot(snapshot: tuple[TrackedPoint, ...]) -> None:
        view.update(snapshot)
        _print_snapshot(view, simulator.generation, as_json=args.json, apple=args.apple)
        if args.ticks and simulator.generation >= args.ticks:
            done.set()

    simulator.subscribe(_on_snapshot)
    _print_snapshot(view, 0, as_json=args.json, apple=args.apple)
    async with simulator:
        await done.wait()


def _main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        seed = load_seed(args.seed_file) if args.seed_file is not None else None
        asyncio.run(_run(args, seed))
    except KeyboardInterrupt:
        _LOG.info("Interrupted")
    except (RecycleMapError, ValueError, OSError) as exc:
        print(f"[sim] {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(_main())
