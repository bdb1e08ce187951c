from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from .models import TouRates, UsageEntry, exact_arithmetic
from .time_of_use import TimeOfUse


class TouConsistencyError(ValueError):
    """An interval starts and ends in different TOU buckets."""


def calculate_flat_cost(rate: Decimal, entries: Iterable[UsageEntry]) -> Decimal:
    """Total cost of the entries at a single flat rate."""

    with exact_arithmetic():
        return sum((rate * entry.net_kwh for entry in entries), Decimal(0))


def calculate_tou_cost(rates: TouRates, entries: Iterable[UsageEntry]) -> Decimal:
    """Total cost of the entries at the rate of the TOU bucket each falls in."""

    with exact_arithmetic():
        return sum(
            (rates.rate_for(classify_entry(entry)) * entry.net_kwh for entry in entries),
            Decimal(0),
        )


def total_net_kwh(entries: Iterable[UsageEntry]) -> Decimal:
    with exact_arithmetic():
        return sum((entry.net_kwh for entry in entries), Decimal(0))


def classify_entry(entry: UsageEntry) -> TimeOfUse:
    """Return the TOU bucket of an interval; intervals are never split across buckets."""

    start_bucket = TimeOfUse.from_time(entry.start_time)
    end_bucket = TimeOfUse.from_time(entry.end_time)
    if start_bucket is not end_bucket:
        raise TouConsistencyError(
            "Start and end times must be in the same TOU period: "
            f"{entry.start_time.isoformat()} is {start_bucket.name}, "
            f"{entry.end_time.isoformat()} is {end_bucket.name}."
        )
    return start_bucket
