"""Diagnostics package.

- pretty_month, new_years_table, round_trip: standard library only
- leap_rules: needs numpy (and matplotlib for --plot), pip install "ethiocal[diagnostics]"
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_rules"]
