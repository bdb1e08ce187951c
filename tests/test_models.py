from datetime import time
from decimal import Decimal

import pytest
from hypothesis import given, strategies as st

from tou_compare.models import TouRates, UsageEntry
from tou_compare.time_of_use import TimeOfUse

kwh = st.decimals(min_value=0, max_value=10000, places=3, allow_nan=False, allow_infinity=False)


@given(kwh, kwh)
def test_net_kwh_is_imported_minus_exported(imported, exported):
    entry = UsageEntry(time(10), time(10, 30), imported, exported)
    assert entry.net_kwh == imported - exported


def test_net_kwh_negative_when_export_exceeds_import():
    entry = UsageEntry(time(12), time(12, 30), Decimal("0.250"), Decimal("1.000"))
    assert entry.net_kwh == Decimal("-0.750")


def test_usage_entry_is_immutable():
    entry = UsageEntry(time(1), time(1, 30), Decimal("1"), Decimal("0"))
    with pytest.raises(AttributeError):
        entry.imported = Decimal("2")


def test_tou_rates_from_values():
    rates = TouRates.from_values(Decimal("0.05"), Decimal("0.10"), Decimal("0.20"))
    assert rates == TouRates(off=Decimal("0.05"), mid=Decimal("0.10"), peak=Decimal("0.20"))


def test_tou_rates_from_values_rejects_partial_set():
    with pytest.raises(ValueError, match="mid-peak, peak"):
        TouRates.from_values(Decimal("0.05"), None, None)


def test_rate_for_bucket():
    rates = TouRates(off=Decimal("0.05"), mid=Decimal("0.10"), peak=Decimal("0.20"))
    assert rates.rate_for(TimeOfUse.OFF) == Decimal("0.05")
    assert rates.rate_for(TimeOfUse.MID) == Decimal("0.10")
    assert rates.rate_for(TimeOfUse.PEAK) == Decimal("0.20")


def test_net_kwh_is_not_rounded():
    entry = UsageEntry(
        time(3),
        time(3, 30),
        Decimal("12345678901234567890.123456789"),
        Decimal("0.000000000000000000001"),
    )
    assert entry.net_kwh == Decimal("12345678901234567890.123456788999999999999")
