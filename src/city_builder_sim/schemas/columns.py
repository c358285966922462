"""Strongly typed column names for the buildings DataFrame.

Defines the data contract between the metrics service and its consumers.
"""


class ColumnNames:
    """Column name constants for one row per placed building."""

    ID = "id"
    KIND = "kind"
    X = "x"
    Z = "z"
    COST_PAID = "cost_paid"

    ALL = [ID, KIND, X, Z, COST_PAID]
