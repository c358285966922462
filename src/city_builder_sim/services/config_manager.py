"""Scenario Management Module.

Handles listing, loading, and saving of city configurations.
Enforces the strictly typed CityConfig schema.  Only configuration is
stored here, never game state.
"""

import json
import logging
from pathlib import Path
from typing import List

from ..schemas import CityConfig

logger = logging.getLogger(__name__)

SCENARIO_DIR = Path.cwd() / "scenarios"


def list_scenarios() -> List[str]:
    """List all available scenario files in the scenarios directory.

    Returns:
        Sorted list of filenames (e.g., ['default.json', 'tight_budget.json']).
    """
    if not SCENARIO_DIR.exists():
        return []
    return sorted(f.name for f in SCENARIO_DIR.glob("*.json"))


def load_scenario(filename: str) -> CityConfig:
    """Load and validate a city configuration from a JSON file.

    Args:
        filename: Name of the file (e.g. 'default.json').

    Returns:
        Validated CityConfig object.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValidationError: If JSON doesn't match schema.
    """
    file_path = SCENARIO_DIR / filename
    if not file_path.exists():
        raise FileNotFoundError(f"Scenario file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    logger.debug(f"Loaded scenario {filename}")
    return CityConfig.model_validate(data)


def save_scenario(config: CityConfig, filename: str) -> Path:
    """Save a city configuration to a JSON file.

    Args:
        config: The CityConfig object to save.
        filename: Target filename.

    Returns:
        Path of the written file.
    """
    SCENARIO_DIR.mkdir(parents=True, exist_ok=True)
    file_path = SCENARIO_DIR / filename

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(config.model_dump_json(indent=2))

    logger.info(f"Saved scenario to {file_path}")
    return file_path
