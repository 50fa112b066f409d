"""Diagnostics package.

- accuracy, validation_suite, benchmark, round_trip: self-checks of the tabular engine
- pretty_month, new_years_table: printed tables
- drift_scatter: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = [
    "accuracy",
    "validation_suite",
    "benchmark",
    "round_trip",
    "pretty_month",
    "new_years_table",
    "drift_scatter",
]
