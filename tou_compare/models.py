from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import time
from decimal import MAX_PREC, Decimal, localcontext
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from .time_of_use import TimeOfUse


@contextmanager
def exact_arithmetic() -> Iterator[None]:
    """Decimal context in which products and sums are never rounded."""

    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        yield


@dataclass(frozen=True)
class UsageEntry:
    """Metered usage for a single billing interval."""

    start_time: time
    end_time: time
    imported: Decimal
    exported: Decimal

    @property
    def net_kwh(self) -> Decimal:
        with exact_arithmetic():
            return self.imported - self.exported


@dataclass(frozen=True)
class TouRates:
    """Time-of-use rates in dollars per kWh."""

    off: Decimal
    mid: Decimal
    peak: Decimal

    @classmethod
    def from_values(
        cls,
        off: Decimal | None,
        mid: Decimal | None,
        peak: Decimal | None,
    ) -> "TouRates":
        missing = [
            name
            for name, value in (("off-peak", off), ("mid-peak", mid), ("peak", peak))
            if value is None
        ]
        if missing:
            raise ValueError(f"Missing TOU rates: {', '.join(missing)}.")
        return cls(off=off, mid=mid, peak=peak)

    def rate_for(self, bucket: "TimeOfUse") -> Decimal:
        return getattr(self, bucket.value)


@dataclass(frozen=True)
class BucketTotal:
    """Net energy and cost accumulated in one TOU bucket."""

    bucket: "TimeOfUse"
    entry_count: int
    net_kwh: Decimal
    cost: Decimal
