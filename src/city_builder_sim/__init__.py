"""City Builder Simulator: grid placement engine for a toy city builder."""

from city_builder_sim.schemas import BuildingKind, CityConfig, RejectionReason
from city_builder_sim.services import CityEngine

__all__ = ["CityEngine", "CityConfig", "BuildingKind", "RejectionReason"]
