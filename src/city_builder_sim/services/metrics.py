"""Derived read-only queries over a simulation state.

This module provides pure functions the presentation layer polls after each
engine call (building counts, affordability, the low-funds flag), plus a
pandas export of the placed buildings.
"""

from typing import Dict, List

import pandas as pd

from city_builder_sim.schemas import (
    Building,
    BuildingKind,
    CityConfig,
    CityStats,
    GridCoordinate,
    SimulationState,
)
from city_builder_sim.schemas.columns import ColumnNames


def building_count(state: SimulationState) -> int:
    """Total number of placed buildings."""
    return len(state.buildings)


def count_by_kind(state: SimulationState) -> Dict[BuildingKind, int]:
    """Number of placed buildings of each kind (every kind present, maybe 0)."""
    counts = {kind: 0 for kind in BuildingKind}
    for building in state.buildings.values():
        counts[building.kind] += 1
    return counts


def building_at(state: SimulationState, coord: GridCoordinate) -> Building | None:
    """Return the building on ``coord``, if any."""
    return state.buildings.get(coord.as_key())


def can_afford(state: SimulationState, kind: BuildingKind, config: CityConfig) -> bool:
    """Whether the treasury covers one ``kind`` building."""
    return state.treasury >= config.spec_for(kind).cost


def affordable_kinds(state: SimulationState, config: CityConfig) -> List[BuildingKind]:
    """Kinds the treasury can currently pay for, in catalog order."""
    return [kind for kind in BuildingKind if can_afford(state, kind, config)]


def is_low_on_funds(state: SimulationState, threshold: int) -> bool:
    """Low-funds warning: treasury below ``threshold`` in a non-empty city.

    An empty city never warns, whatever the treasury.
    """
    return state.treasury < threshold and len(state.buildings) > 0


def calculate_city_stats(state: SimulationState, config: CityConfig) -> CityStats:
    """Bundle every derived query into one summary."""
    return CityStats(
        treasury=state.treasury,
        population=state.population,
        happiness=state.happiness,
        building_count=building_count(state),
        counts_by_kind=count_by_kind(state),
        low_funds=is_low_on_funds(state, config.low_funds_threshold),
        affordable_kinds=affordable_kinds(state, config),
    )


def buildings_dataframe(state: SimulationState) -> pd.DataFrame:
    """One row per building, in placement order.

    Returns:
        DataFrame with the columns in ``ColumnNames.ALL``.
    """
    rows = [
        {
            ColumnNames.ID: b.id,
            ColumnNames.KIND: b.kind.value,
            ColumnNames.X: b.coord.x,
            ColumnNames.Z: b.coord.z,
            ColumnNames.COST_PAID: b.cost_paid,
        }
        for b in state.buildings.values()
    ]
    return pd.DataFrame(rows, columns=ColumnNames.ALL)
