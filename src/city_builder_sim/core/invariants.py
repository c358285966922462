"""Invariant checks over a simulation state.

Used by tests and by the headless driver.  Returns a list of
human-readable violations rather than raising, so a caller can report all of
them at once.
"""

import logging
from collections import Counter

from city_builder_sim.core.grid import in_bounds
from city_builder_sim.schemas import BuildingKind, CityConfig, SimulationState
from city_builder_sim.schemas.defaults import HAPPINESS_MAX, HAPPINESS_MIN

logger = logging.getLogger(__name__)


def find_violations(state: SimulationState, config: CityConfig) -> list[str]:
    """Check every state invariant against ``config``.

    Args:
        state: Snapshot to check.
        config: Configuration the state was produced under.

    Returns:
        List of violation messages (empty if the state is valid).
    """
    violations: list[str] = []

    if state.treasury < 0:
        violations.append(f"treasury is negative: {state.treasury}")
    if not HAPPINESS_MIN <= state.happiness <= HAPPINESS_MAX:
        violations.append(f"happiness out of range: {state.happiness}")
    if state.population < 0:
        violations.append(f"population is negative: {state.population}")

    expected_population = 0
    coords = Counter()
    for key, building in state.buildings.items():
        coords[building.coord.as_key()] += 1
        if building.coord.as_key() != key:
            violations.append(
                f"building {building.id} stored under {key} but sits at "
                f"{building.coord.as_key()}"
            )
        if not isinstance(building.kind, BuildingKind):
            violations.append(f"building {building.id} has unknown kind")
            continue
        if not in_bounds(building.coord, config.grid_size):
            violations.append(f"building {building.id} is off the grid")
        expected_population += config.spec_for(building.kind).population_delta

    for key, count in coords.items():
        if count > 1:
            violations.append(f"{count} buildings share cell {key}")

    if state.population != expected_population:
        violations.append(
            f"population {state.population} != catalog sum {expected_population}"
        )

    if violations:
        logger.debug(f"Found {len(violations)} invariant violation(s)")
    return violations
