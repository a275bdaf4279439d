"""Diagnostics package.

- new_years_table, pretty_month, round_trip: always available, text output
- year_types, rosh_hashana_scatter: plots, require the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "year_types", "rosh_hashana_scatter"]
