from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Dict, List, Sequence

from .aggregates import aggregate_by_bucket
from .costs import calculate_flat_cost, calculate_tou_cost, total_net_kwh
from .models import BucketTotal, TouRates, UsageEntry, exact_arithmetic
from .time_of_use import TimeOfUse

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class ComparisonReport:
    entry_count: int
    total_net_kwh: Decimal
    flat_cost: Decimal
    tou_cost: Decimal
    difference: Decimal
    difference_pct: Decimal
    buckets: Dict[TimeOfUse, BucketTotal]

    @property
    def outcome(self) -> str:
        if self.tou_cost < self.flat_cost:
            return "save"
        if self.tou_cost > self.flat_cost:
            return "pay_more"
        return "same"


def build_comparison_report(
    entries: Sequence[UsageEntry],
    flat_rate: Decimal,
    tou_rates: TouRates,
) -> ComparisonReport:
    """Compare the cost of the entries at a flat rate against TOU rates."""

    flat_cost = calculate_flat_cost(flat_rate, entries)
    tou_cost = calculate_tou_cost(tou_rates, entries)
    with exact_arithmetic():
        difference = tou_cost - flat_cost

    return ComparisonReport(
        entry_count=len(entries),
        total_net_kwh=total_net_kwh(entries),
        flat_cost=flat_cost,
        tou_cost=tou_cost,
        difference=difference,
        difference_pct=_difference_pct(flat_cost, difference),
        buckets=aggregate_by_bucket(tou_rates, entries),
    )


def format_report(report: ComparisonReport, *, breakdown: bool = False) -> List[str]:
    lines = [
        f"Found {report.entry_count} usage entries",
        f"Total KWH used: {_money(report.total_net_kwh)}",
        f"Current cost: ${_money(report.flat_cost)}",
        f"TOU cost: ${_money(report.tou_cost)}",
    ]
    if report.outcome == "save":
        lines.append(
            f"You would save ${_money(report.difference.copy_negate())} by switching to TOU rates!"
        )
    elif report.outcome == "pay_more":
        lines.append(
            f"You would pay ${_money(report.difference)} more by switching to TOU rates!"
        )
    else:
        lines.append("You would pay the same amount with TOU rates. Try another bill?")
    if breakdown:
        lines.extend(_format_buckets(report.buckets))
        lines.append(f"Difference: {report.difference_pct:+.1f}% of current cost")
    return lines


def _format_buckets(buckets: Dict[TimeOfUse, BucketTotal]) -> List[str]:
    lines = [f"{'Period':<6} {'Entries':>8} {'KWH':>12} {'Cost':>12}"]
    for total in buckets.values():
        lines.append(
            f"{total.bucket.name:<6} {total.entry_count:>8} "
            f"{_money(total.net_kwh):>12} {'$' + _money(total.cost):>12}"
        )
    return lines


def _difference_pct(reference_total: Decimal, difference: Decimal) -> Decimal:
    if reference_total == 0:
        return Decimal(0)
    return difference / reference_total * 100


def _money(value: Decimal) -> str:
    return f"{value.quantize(CENTS, rounding=ROUND_HALF_EVEN)}"
