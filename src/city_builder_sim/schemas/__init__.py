"""Schemas package.

- enums.py: BuildingKind, RejectionReason
- config.py: Configuration models (CityConfig, BuildingSpec)
- data.py: Simulation data models (SimulationState, Building, etc.)
"""

from .config import BuildingSpec, CityConfig, default_catalog
from .data import (
    Building,
    CityStats,
    GridCoordinate,
    PlacementResult,
    SimulationState,
)
from .enums import BuildingKind, RejectionReason

__all__ = [
    "BuildingKind",
    "RejectionReason",
    "BuildingSpec",
    "CityConfig",
    "default_catalog",
    "GridCoordinate",
    "Building",
    "SimulationState",
    "PlacementResult",
    "CityStats",
]
