"""Pure state transitions for the city simulation.

Each function takes the current ``SimulationState`` and returns a new one
(or a ``PlacementResult`` wrapping one).  Inputs are never mutated: the
occupancy map is copied before a building is added and handed out as a
read-only view.

Placement preconditions, checked in order (first failure wins):
    1. A tool is selected.
    2. The coordinate is on the grid.
    3. The treasury covers the cost.
    4. The cell is free.

All functions operate on schema objects only, with no knowledge of the
engine's id sequence or of logging.
"""

from __future__ import annotations

from city_builder_sim.core.grid import in_bounds
from city_builder_sim.schemas import (
    Building,
    BuildingKind,
    CityConfig,
    GridCoordinate,
    PlacementResult,
    RejectionReason,
    SimulationState,
)
from city_builder_sim.schemas.data import freeze_buildings
from city_builder_sim.schemas.defaults import HAPPINESS_MAX


def initial_state(config: CityConfig) -> SimulationState:
    """Return the starting state described by ``config``."""
    return SimulationState(
        treasury=config.initial_treasury,
        population=0,
        happiness=config.initial_happiness,
        selected_kind=None,
        buildings={},
    )


def select_tool(state: SimulationState, kind: BuildingKind | None) -> SimulationState:
    """Arm ``kind``, or disarm if it is already armed.

    Passing None always disarms.
    """
    if kind is not None:
        kind = BuildingKind(kind)
    new_kind = None if kind == state.selected_kind else kind
    return state.model_copy(update={"selected_kind": new_kind})


def check_placement(
    state: SimulationState, coord: GridCoordinate, config: CityConfig
) -> RejectionReason | None:
    """Return the first failing precondition, or None if placement is allowed."""
    if state.selected_kind is None:
        return RejectionReason.NO_TOOL_SELECTED
    if not in_bounds(coord, config.grid_size):
        return RejectionReason.OUT_OF_BOUNDS
    if state.treasury < config.spec_for(state.selected_kind).cost:
        return RejectionReason.INSUFFICIENT_FUNDS
    if state.is_occupied(coord):
        return RejectionReason.CELL_OCCUPIED
    return None


def place_building(
    state: SimulationState,
    coord: GridCoordinate,
    config: CityConfig,
    building_id: str,
) -> PlacementResult:
    """Attempt to place the selected building on ``coord``.

    Args:
        state: Current state (not modified).
        coord: Target cell.
        config: Catalog and grid configuration.
        building_id: Identifier for the new building; the caller guarantees
            uniqueness.

    Returns:
        PlacementResult.  On rejection, ``state`` is the input state itself.
    """
    reason = check_placement(state, coord, config)
    if reason is not None:
        return PlacementResult(state=state, accepted=False, reason=reason)

    kind = state.selected_kind
    spec = config.spec_for(kind)
    building = Building(id=building_id, kind=kind, coord=coord, cost_paid=spec.cost)

    buildings = dict(state.buildings)
    buildings[coord.as_key()] = building

    new_state = state.model_copy(
        update={
            "treasury": state.treasury - spec.cost,
            "population": state.population + spec.population_delta,
            # Deltas are non-negative, so only the ceiling can bind.
            "happiness": min(HAPPINESS_MAX, state.happiness + spec.happiness_delta),
            "buildings": freeze_buildings(buildings),
        }
    )
    return PlacementResult(state=new_state, accepted=True, building=building)
