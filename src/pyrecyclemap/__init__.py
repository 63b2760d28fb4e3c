"""pyrecyclemap - Live map simulation for recycling collection points."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyrecyclemap")
except PackageNotFoundError:
    __version__ = "0+local"
from pyrecyclemap.config import ProjectionConfig, SimulationConfig
from pyrecyclemap.exceptions import (
    DuplicateIdentifierError,
    GeolocationUnavailableError,
    PointKindError,
    RecycleMapConfigError,
    RecycleMapError,
    UnknownPointIdError,
)
from pyrecyclemap.geolocation import ViewerPositionFeed, read_viewer_position
from pyrecyclemap.models import (
    Coordinates,
    MapStyle,
    PointDetail,
    PointKind,
    PointStatus,
    ProjectedPoint,
    ScreenCoordinate,
    SelectionState,
    StyleDescriptor,
    StyleTone,
    TrackedPoint,
    ViewerPosition,
)
from pyrecyclemap.navigation import build_navigation_url, is_apple_platform
from pyrecyclemap.projection import MapView, derive_visual_style, describe_capacity, project
from pyrecyclemap.scheduler import AsyncioTickScheduler, ManualTickScheduler
from pyrecyclemap.seed import DEFAULT_SEED, load_seed
from pyrecyclemap.simulator import Simulator
from pyrecyclemap.state import Registry, capacity_alerts

__all__ = [
    "__version__",
    "AsyncioTickScheduler",
    "Coordinates",
    "DEFAULT_SEED",
    "DuplicateIdentifierError",
    "GeolocationUnavailableError",
    "ManualTickScheduler",
    "MapStyle",
    "MapView",
    "PointDetail",
    "PointKind",
    "PointKindError",
    "PointStatus",
    "ProjectedPoint",
    "ProjectionConfig",
    "RecycleMapConfigError",
    "RecycleMapError",
    "Registry",
    "ScreenCoordinate",
    "SelectionState",
    "SimulationConfig",
    "Simulator",
    "StyleDescriptor",
    "StyleTone",
    "TrackedPoint",
    "UnknownPointIdError",
    "ViewerPosition",
    "ViewerPositionFeed",
    "build_navigation_url",
    "capacity_alerts",
    "derive_visual_style",
    "describe_capacity",
    "is_apple_platform",
    "load_seed",
    "project",
    "read_viewer_position",
]
