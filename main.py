"""Entry point for the City Builder Simulator.

Replays a short build script against every city configuration found in
``scenarios/`` and prints the resulting statistics.
"""

import logging

from city_builder_sim.core.invariants import find_violations
from city_builder_sim.schemas import BuildingKind, CityConfig
from city_builder_sim.services.config_manager import list_scenarios, load_scenario
from city_builder_sim.services.engine import CityEngine

# (kind, x, z) placements; a kind of None keeps the armed tool
DEMO_SCRIPT: list[tuple[BuildingKind | None, int, int]] = [
    (BuildingKind.ROAD, 0, 0),
    (None, 1, 0),
    (None, 2, 0),
    (BuildingKind.RESIDENTIAL, 0, 1),
    (None, 1, 1),
    (None, 1, 1),  # occupied, rejected
    (BuildingKind.COMMERCIAL, 2, 1),
    (None, 3, 1),
    (BuildingKind.INDUSTRIAL, -3, -3),
    (None, 100, 100),  # off the grid, rejected
]


def run_scenario(
    name: str,
    config: CityConfig,
    script: list[tuple[BuildingKind | None, int, int]] = DEMO_SCRIPT,
) -> CityEngine:
    """Run a single build script.

    Args:
        name: Scenario name.
        config: Validated city configuration.
        script: Placements to replay.

    Returns:
        The engine after the script, for inspection.
    """
    print(f"--- Running {name}: {config.description} ---")
    engine = CityEngine(config)

    for kind, x, z in script:
        if kind is not None and engine.state.selected_kind != kind:
            engine.select_tool(kind)
        result = engine.place_building(x, z)
        if not result.accepted:
            print(f"  ({x}, {z}) rejected: {result.reason.value}")

    stats = engine.stats()
    print(f"Results for {name}:")
    print(f"  Treasury:   {stats.treasury:,}")
    print(f"  Population: {stats.population:,}")
    print(f"  Happiness:  {stats.happiness}%")
    print(f"  Buildings:  {stats.building_count}")
    if stats.low_funds:
        print("  Low on funds!")

    violations = find_violations(engine.state, config)
    for violation in violations:
        print(f"  INVARIANT VIOLATED: {violation}")
    print("\n")
    return engine


def main() -> None:
    """Load scenarios and run them."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    scenarios = list_scenarios()
    if not scenarios:
        print("No scenario config found. Running the stock city.")
        run_scenario("Default", CityConfig())
        return

    for filename in scenarios:
        config = load_scenario(filename)
        run_scenario(config.name or filename, config)


if __name__ == "__main__":
    main()
