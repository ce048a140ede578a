"""Core business logic layer.

Subpackages:
- distribution: weekly chore distribution engine and its cadence gate
- reporting: read-side queries and statistics over a Household
"""
__all__ = ["distribution", "reporting"]
