"""Services package for driving the simulation.

This package contains:
- engine.py: CityEngine, the owner of the current snapshot
- metrics.py: Derived read-only queries
- config_manager.py: Scenario file loading/saving
"""

from city_builder_sim.services.engine import CityEngine

__all__ = ["CityEngine"]
