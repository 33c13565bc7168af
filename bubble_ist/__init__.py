"""Parent tables for the independent spanning trees of bubble-sort networks."""

__version__ = "0.1.0"
__all__ = ["cli", "parents", "permutations", "table"]