"""Enumerated tags shared by the config and data schemas."""

from enum import Enum


class BuildingKind(str, Enum):
    """Building categories a player can place on the grid."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    ROAD = "road"


class RejectionReason(str, Enum):
    """Why a placement was refused.

    Checked in declaration order; the first failing precondition wins.
    """

    NO_TOOL_SELECTED = "no-tool-selected"
    OUT_OF_BOUNDS = "out-of-bounds"
    INSUFFICIENT_FUNDS = "insufficient-funds"
    CELL_OCCUPIED = "cell-occupied"
