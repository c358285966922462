"""Configuration schemas for the simulation."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from city_builder_sim.schemas.defaults import (
    DEFAULT_COMMERCIAL_COST,
    DEFAULT_COMMERCIAL_HAPPINESS,
    DEFAULT_DESCRIPTIONS,
    DEFAULT_GRID_SIZE,
    DEFAULT_INDUSTRIAL_COST,
    DEFAULT_INITIAL_HAPPINESS,
    DEFAULT_INITIAL_TREASURY,
    DEFAULT_LABELS,
    DEFAULT_LOW_FUNDS_THRESHOLD,
    DEFAULT_RESIDENTIAL_COST,
    DEFAULT_RESIDENTIAL_POPULATION,
    DEFAULT_ROAD_COST,
    HAPPINESS_MAX,
    HAPPINESS_MIN,
)
from city_builder_sim.schemas.enums import BuildingKind


class BuildingSpec(BaseModel):
    """Static, per-kind properties of a building (one catalog entry).

    Deltas are non-negative: placement can only raise population and
    happiness, never lower them.
    """

    cost: int = Field(..., gt=0, description="Purchase price")
    population_delta: int = Field(
        0, ge=0, description="Population granted per placement"
    )
    happiness_delta: int = Field(
        0, ge=0, description="Happiness granted per placement (saturating)"
    )
    label: str = Field("", description="Display name")
    description: str = Field("", description="One-line player hint")

    model_config = ConfigDict(frozen=True)


def default_catalog() -> dict[BuildingKind, BuildingSpec]:
    """Build the stock catalog."""
    return {
        BuildingKind.RESIDENTIAL: BuildingSpec(
            cost=DEFAULT_RESIDENTIAL_COST,
            population_delta=DEFAULT_RESIDENTIAL_POPULATION,
            label=DEFAULT_LABELS[BuildingKind.RESIDENTIAL],
            description=DEFAULT_DESCRIPTIONS[BuildingKind.RESIDENTIAL],
        ),
        BuildingKind.COMMERCIAL: BuildingSpec(
            cost=DEFAULT_COMMERCIAL_COST,
            happiness_delta=DEFAULT_COMMERCIAL_HAPPINESS,
            label=DEFAULT_LABELS[BuildingKind.COMMERCIAL],
            description=DEFAULT_DESCRIPTIONS[BuildingKind.COMMERCIAL],
        ),
        BuildingKind.INDUSTRIAL: BuildingSpec(
            cost=DEFAULT_INDUSTRIAL_COST,
            label=DEFAULT_LABELS[BuildingKind.INDUSTRIAL],
            description=DEFAULT_DESCRIPTIONS[BuildingKind.INDUSTRIAL],
        ),
        BuildingKind.ROAD: BuildingSpec(
            cost=DEFAULT_ROAD_COST,
            label=DEFAULT_LABELS[BuildingKind.ROAD],
            description=DEFAULT_DESCRIPTIONS[BuildingKind.ROAD],
        ),
    }


class CityConfig(BaseModel):
    """Root configuration for a city.

    Everything the presentation layer may override when constructing an
    engine: grid size, starting resources, the low-funds threshold and the
    building catalog.
    """

    name: str = "City"
    description: str = ""
    grid_size: int = Field(
        DEFAULT_GRID_SIZE,
        gt=0,
        description="Side length N of the square grid (even)",
    )
    initial_treasury: int = Field(
        DEFAULT_INITIAL_TREASURY,
        ge=0,
        description="Treasury at start and after reset",
    )
    initial_happiness: int = Field(
        DEFAULT_INITIAL_HAPPINESS,
        ge=HAPPINESS_MIN,
        le=HAPPINESS_MAX,
        description="Happiness at start and after reset (percent)",
    )
    low_funds_threshold: int = Field(
        DEFAULT_LOW_FUNDS_THRESHOLD,
        ge=0,
        description="Treasury below this raises the low-funds flag",
    )
    catalog: dict[BuildingKind, BuildingSpec] = Field(default_factory=default_catalog)

    model_config = ConfigDict(frozen=True)

    @field_validator("grid_size")
    @classmethod
    def _grid_size_even(cls, value: int) -> int:
        # Centred bounds [-N/2, N/2 - 1] only tile the grid when N is even.
        if value % 2:
            raise ValueError(f"grid_size must be even, got {value}")
        return value

    @field_validator("catalog")
    @classmethod
    def _catalog_complete(
        cls, value: dict[BuildingKind, BuildingSpec]
    ) -> dict[BuildingKind, BuildingSpec]:
        missing = [kind.value for kind in BuildingKind if kind not in value]
        if missing:
            raise ValueError(f"catalog is missing kinds: {', '.join(missing)}")
        return value

    def spec_for(self, kind: BuildingKind) -> BuildingSpec:
        """Return the catalog entry for ``kind``."""
        return self.catalog[kind]

    def with_overrides(self, **update) -> "CityConfig":
        """Return a copy with ``update`` applied and every validator re-run.

        Unlike ``model_copy(update=...)``, invalid overrides raise here.

        Raises:
            ValidationError: If the overridden config is invalid.
        """
        return CityConfig.model_validate({**self.model_dump(), **update})
