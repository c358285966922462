"""Simulation state and snapshot schemas.

Every model here is frozen.  Transitions build new instances instead of
mutating old ones, so a consumer holding an old snapshot never sees a later
state.
"""

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .defaults import HAPPINESS_MAX, HAPPINESS_MIN
from .enums import BuildingKind, RejectionReason


class GridCoordinate(BaseModel):
    """One cell of the grid, identified by signed ``(x, z)``."""

    x: int
    z: int

    model_config = ConfigDict(frozen=True)

    def as_key(self) -> tuple[int, int]:
        """Key used by the occupancy map."""
        return (self.x, self.z)


class Building(BaseModel):
    """A placed building instance."""

    id: str = Field(..., description="Unique identifier within the session")
    kind: BuildingKind
    coord: GridCoordinate
    cost_paid: int = Field(..., ge=0, description="Price at time of purchase")

    model_config = ConfigDict(frozen=True)


def freeze_buildings(
    buildings: Mapping[tuple[int, int], Building],
) -> Mapping[tuple[int, int], Building]:
    """Return a read-only view over a private copy of ``buildings``."""
    return MappingProxyType(dict(buildings))


class SimulationState(BaseModel):
    """The whole authoritative state of one city.

    ``buildings`` maps ``(x, z)`` to the building occupying that cell and
    keeps insertion order, which consumers may rely on for stable rendering.
    The mapping is a read-only view; writing through it raises TypeError.
    """

    treasury: int = Field(..., ge=0, description="Currency balance")
    population: int = Field(0, ge=0)
    happiness: int = Field(..., ge=HAPPINESS_MIN, le=HAPPINESS_MAX)
    selected_kind: BuildingKind | None = Field(
        None, description="Tool armed for placement"
    )
    buildings: Mapping[tuple[int, int], Building] = Field(
        default_factory=lambda: MappingProxyType({})
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("buildings")
    @classmethod
    def _read_only_buildings(
        cls, value: Mapping[tuple[int, int], Building]
    ) -> Mapping[tuple[int, int], Building]:
        return freeze_buildings(value)

    @field_serializer("buildings")
    def _serialize_buildings(
        self, value: Mapping[tuple[int, int], Building]
    ) -> dict[tuple[int, int], Building]:
        return dict(value)

    def is_occupied(self, coord: GridCoordinate) -> bool:
        """Whether a building already stands on ``coord``."""
        return coord.as_key() in self.buildings

    def building_list(self) -> list[Building]:
        """Buildings in placement order."""
        return list(self.buildings.values())


class PlacementResult(BaseModel):
    """Outcome of one placement attempt.

    On rejection ``state`` is the unchanged input state and ``reason`` says
    why; on success ``building`` is the newly placed instance.
    """

    state: SimulationState
    accepted: bool
    reason: RejectionReason | None = None
    building: Building | None = None

    model_config = ConfigDict(frozen=True)


class CityStats(BaseModel):
    """Read-only summary polled by the presentation layer after each call."""

    treasury: int
    population: int
    happiness: int
    building_count: int
    counts_by_kind: dict[BuildingKind, int]
    low_funds: bool = Field(..., description="Low on funds with a non-empty city")
    affordable_kinds: list[BuildingKind]

    model_config = ConfigDict(frozen=True)
