from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable

from .costs import classify_entry
from .models import BucketTotal, TouRates, UsageEntry, exact_arithmetic
from .time_of_use import TimeOfUse


def aggregate_by_bucket(
    rates: TouRates,
    entries: Iterable[UsageEntry],
) -> Dict[TimeOfUse, BucketTotal]:
    """Aggregate net kWh and cost per TOU bucket, including empty buckets."""

    counts: Dict[TimeOfUse, int] = defaultdict(int)
    kwh: Dict[TimeOfUse, Decimal] = defaultdict(Decimal)
    with exact_arithmetic():
        for entry in entries:
            bucket = classify_entry(entry)
            counts[bucket] += 1
            kwh[bucket] += entry.net_kwh
        return {
            bucket: BucketTotal(
                bucket=bucket,
                entry_count=counts[bucket],
                net_kwh=kwh[bucket],
                cost=rates.rate_for(bucket) * kwh[bucket],
            )
            for bucket in TimeOfUse
        }
