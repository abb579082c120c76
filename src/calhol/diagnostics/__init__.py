"""Diagnostics package.

- holiday_table: always available, light-weight
- feast_scatter: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["holiday_table", "feast_scatter"]
