"""Default parameter values for the City Builder Simulator.

These constants are used as `Field(default=...)` values in the Pydantic
config schemas.  They live here (in the schemas layer) rather than in
`core/` so that `schemas` does not depend on `core`.

All currency amounts are whole units of the in-game currency.
"""

from .enums import BuildingKind

# --- Grid ---
# Square grid centred on the origin.  Valid cells satisfy
#   -GRID_SIZE / 2 <= x, z <= GRID_SIZE / 2 - 1
DEFAULT_GRID_SIZE = 20

# --- Starting Resources ---
DEFAULT_INITIAL_TREASURY = 10000
DEFAULT_INITIAL_HAPPINESS = 50  # percent, 0-100

# --- Happiness Bounds ---
HAPPINESS_MIN = 0
HAPPINESS_MAX = 100

# --- Low Funds Warning ---
# Flag raised when the treasury falls below this AND the city has at least
# one building.  An empty city never shows the warning.
DEFAULT_LOW_FUNDS_THRESHOLD = 100

# --- Building Catalog ---
# kind -> (cost, population_delta, happiness_delta)
#   residential: only source of population
#   commercial: only source of happiness
#   industrial / road: no metric effect, cost only
DEFAULT_RESIDENTIAL_COST = 100
DEFAULT_RESIDENTIAL_POPULATION = 10
DEFAULT_COMMERCIAL_COST = 200
DEFAULT_COMMERCIAL_HAPPINESS = 2
DEFAULT_INDUSTRIAL_COST = 300
DEFAULT_ROAD_COST = 50

# Player-facing catalog text.
DEFAULT_LABELS = {
    BuildingKind.RESIDENTIAL: "Residential",
    BuildingKind.COMMERCIAL: "Commercial",
    BuildingKind.INDUSTRIAL: "Industrial",
    BuildingKind.ROAD: "Road",
}
# TODO: industrial hint copy is pending the decision on industrial effects.
DEFAULT_DESCRIPTIONS = {
    BuildingKind.RESIDENTIAL: "Residential buildings increase population",
    BuildingKind.COMMERCIAL: "Commercial buildings boost happiness",
    BuildingKind.INDUSTRIAL: "",
    BuildingKind.ROAD: "Roads connect your city infrastructure",
}
