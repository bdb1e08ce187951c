"""Flat-rate versus time-of-use cost comparison for interval usage exports."""

from .aggregates import aggregate_by_bucket
from .costs import (
    TouConsistencyError,
    calculate_flat_cost,
    calculate_tou_cost,
    total_net_kwh,
)
from .locations import LOCATION_RATES, TouLocation, resolve_tou_rates
from .models import BucketTotal, TouRates, UsageEntry
from .reporting import ComparisonReport, build_comparison_report, format_report
from .time_of_use import TimeOfUse
from .usage import UsageFileError, read_usage_from_csv, read_usage_from_lines

__version__ = "0.1.0"

__all__ = [
    "aggregate_by_bucket",
    "build_comparison_report",
    "BucketTotal",
    "calculate_flat_cost",
    "calculate_tou_cost",
    "ComparisonReport",
    "format_report",
    "LOCATION_RATES",
    "read_usage_from_csv",
    "read_usage_from_lines",
    "resolve_tou_rates",
    "TimeOfUse",
    "total_net_kwh",
    "TouConsistencyError",
    "TouLocation",
    "TouRates",
    "UsageEntry",
    "UsageFileError",
]
