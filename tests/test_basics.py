"""Basic tests for configuration and schema validation."""

import pytest
from pydantic import ValidationError

from city_builder_sim.schemas import (
    BuildingKind,
    BuildingSpec,
    CityConfig,
    SimulationState,
    default_catalog,
)
from city_builder_sim.schemas.defaults import DEFAULT_DESCRIPTIONS, DEFAULT_LABELS


def test_default_catalog() -> None:
    """The stock catalog prices and effects."""
    catalog = default_catalog()
    assert [catalog[k].cost for k in BuildingKind] == [100, 200, 300, 50]
    assert catalog[BuildingKind.RESIDENTIAL].population_delta == 10
    assert catalog[BuildingKind.COMMERCIAL].happiness_delta == 2
    assert catalog[BuildingKind.INDUSTRIAL].happiness_delta == 0
    assert catalog[BuildingKind.ROAD].label == "Road"


def test_default_catalog_text() -> None:
    """Labels and hints are keyed by kind; industrial has no hint yet."""
    assert set(DEFAULT_LABELS) == set(BuildingKind)
    assert set(DEFAULT_DESCRIPTIONS) == set(BuildingKind)
    catalog = default_catalog()
    assert catalog[BuildingKind.INDUSTRIAL].description == ""
    assert catalog[BuildingKind.COMMERCIAL].description == (
        "Commercial buildings boost happiness"
    )


def test_city_config_defaults() -> None:
    """Defaults match the stock city."""
    config = CityConfig()
    assert config.grid_size == 20
    assert config.initial_treasury == 10000
    assert config.initial_happiness == 50
    assert config.low_funds_threshold == 100


def test_config_with_overrides() -> None:
    """Frozen configs are varied through with_overrides."""
    config = CityConfig().with_overrides(initial_treasury=40)
    assert config.initial_treasury == 40
    assert config.catalog == CityConfig().catalog
    assert CityConfig().initial_treasury == 10000


@pytest.mark.parametrize(
    "update", [{"initial_happiness": 150}, {"grid_size": 21}, {"initial_treasury": -1}]
)
def test_config_with_overrides_validates(update: dict) -> None:
    """Invalid overrides fail immediately instead of at engine start."""
    with pytest.raises(ValidationError):
        CityConfig().with_overrides(**update)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"grid_size": 0},
        {"grid_size": 21},
        {"initial_treasury": -1},
        {"initial_happiness": 101},
        {"initial_happiness": -5},
        {"low_funds_threshold": -1},
    ],
)
def test_city_config_rejects_bad_values(kwargs: dict) -> None:
    """Out-of-range settings fail validation."""
    with pytest.raises(ValidationError):
        CityConfig(**kwargs)


def test_catalog_must_cover_every_kind() -> None:
    """A catalog missing a kind is refused."""
    catalog = default_catalog()
    del catalog[BuildingKind.ROAD]
    with pytest.raises(ValidationError, match="road"):
        CityConfig(catalog=catalog)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"cost": 0},
        {"cost": 10, "population_delta": -1},
        {"cost": 10, "happiness_delta": -2},
    ],
)
def test_building_spec_rejects_bad_values(kwargs: dict) -> None:
    """Costs are positive and deltas non-negative."""
    with pytest.raises(ValidationError):
        BuildingSpec(**kwargs)


def test_catalog_accepts_string_keys() -> None:
    """Kind names are coerced, as when loaded from JSON."""
    config = CityConfig(
        catalog={kind.value: {"cost": 5} for kind in BuildingKind},
    )
    assert config.spec_for(BuildingKind.INDUSTRIAL).cost == 5


def test_state_rejects_out_of_range() -> None:
    """Snapshots cannot be built with broken metrics."""
    with pytest.raises(ValidationError):
        SimulationState(treasury=-1, happiness=50)
    with pytest.raises(ValidationError):
        SimulationState(treasury=0, happiness=101)


def test_state_dump_returns_plain_dict(state_factory, building_factory) -> None:
    """The read-only occupancy view dumps as an ordinary dict."""
    state = state_factory([building_factory(x=1, z=2)], population=10)
    dumped = state.model_dump()
    assert type(dumped["buildings"]) is dict
    assert dumped["buildings"][(1, 2)]["kind"] == BuildingKind.RESIDENTIAL
