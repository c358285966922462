"""City engine - owns the authoritative simulation state.

The engine holds the current ``SimulationState`` snapshot and the building
id sequence.  Every operation delegates to the pure transitions in
``core.transitions`` and swaps in the returned snapshot; nothing is mutated
in place, so snapshots handed out earlier stay valid.
"""

import logging

from city_builder_sim.core.grid import point_to_cell
from city_builder_sim.core.invariants import find_violations
from city_builder_sim.core.transitions import (
    initial_state,
    place_building,
    select_tool,
)
from city_builder_sim.schemas import (
    BuildingKind,
    CityConfig,
    CityStats,
    GridCoordinate,
    PlacementResult,
    SimulationState,
)
from city_builder_sim.services.metrics import calculate_city_stats

logger = logging.getLogger(__name__)


class CityEngine:
    """Stateful facade over the pure city transitions.

    Callers serialize all invocations; the engine does no locking.

    Attributes:
        config: Grid, starting resources and catalog for this city.
    """

    def __init__(
        self,
        config: CityConfig | None = None,
        state: SimulationState | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config: City configuration. Defaults to the stock city.
            state: Optional starting snapshot, e.g. to resume a test fixture.
                ``reset()`` always returns to ``config``'s initial state.

        Raises:
            ValidationError: If ``config`` fails validation (e.g. it was
                built with ``model_copy(update=...)``).
            ValueError: If ``state`` breaks an invariant under ``config``.
        """
        # Re-run validators; model_copy overrides skip them.
        self.config = CityConfig.model_validate((config or CityConfig()).model_dump())
        if state is None:
            state = initial_state(self.config)
        else:
            violations = find_violations(state, self.config)
            if violations:
                raise ValueError(f"Invalid starting state: {'; '.join(violations)}")
        self._state = state
        # Never rewound, so ids stay unique across resets.
        self._sequence = 0

    @property
    def state(self) -> SimulationState:
        """The current snapshot."""
        return self._state

    def select_tool(self, kind: BuildingKind | str | None) -> SimulationState:
        """Arm a building kind, or disarm if it is already armed.

        Args:
            kind: Kind (or its string value) to arm; None disarms.

        Returns:
            The new snapshot.
        """
        self._state = select_tool(self._state, kind)
        logger.debug(f"Selected tool: {self._state.selected_kind}")
        return self._state

    def place_building(self, x: int, z: int) -> PlacementResult:
        """Place the armed building on cell ``(x, z)``."""
        return self.place_at(GridCoordinate(x=x, z=z))

    def place_at(self, coord: GridCoordinate) -> PlacementResult:
        """Place the armed building on ``coord``.

        Rejections leave the state untouched and carry a reason code.
        """
        kind = self._state.selected_kind
        building_id = f"{kind.value}-{self._sequence + 1}" if kind else ""

        result = place_building(self._state, coord, self.config, building_id)
        if not result.accepted:
            logger.info(
                f"Placement at ({coord.x}, {coord.z}) rejected: {result.reason.value}"
            )
            return result

        self._sequence += 1
        self._state = result.state
        logger.info(
            f"Placed {result.building.id} at ({coord.x}, {coord.z}). "
            f"Treasury: {self._state.treasury}, Population: {self._state.population}, "
            f"Happiness: {self._state.happiness}"
        )
        return result

    def place_at_point(self, px: float, pz: float) -> PlacementResult:
        """Place the armed building on the cell nearest a ground-plane point."""
        return self.place_at(point_to_cell(px, pz))

    def reset(self) -> SimulationState:
        """Discard everything and return to the configured initial state."""
        self._state = initial_state(self.config)
        logger.info(f"City reset. Treasury: {self._state.treasury}")
        return self._state

    def stats(self) -> CityStats:
        """Derived metrics for the current snapshot."""
        return calculate_city_stats(self._state, self.config)
