"""Shared test fixtures."""

from typing import Callable

import pytest

from city_builder_sim.schemas import Building, CityConfig, SimulationState
from city_builder_sim.services.engine import CityEngine
from .factories import create_building, create_city_config, create_state


@pytest.fixture
def building_factory() -> Callable[..., Building]:
    """Fixture that returns the building factory function."""
    return create_building


@pytest.fixture
def state_factory() -> Callable[..., SimulationState]:
    """Fixture that returns the simulation state factory function."""
    return create_state


@pytest.fixture
def city_config_factory() -> Callable[..., CityConfig]:
    """Fixture that returns the city config factory function."""
    return create_city_config


@pytest.fixture
def basic_config() -> CityConfig:
    """Return the stock city configuration."""
    return CityConfig()


@pytest.fixture
def engine(basic_config: CityConfig) -> CityEngine:
    """Return an engine on the stock configuration."""
    return CityEngine(basic_config)
