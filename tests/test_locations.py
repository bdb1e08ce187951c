from decimal import Decimal

import pytest

from tou_compare.locations import LOCATION_RATES, TouLocation, resolve_tou_rates
from tou_compare.models import TouRates


def test_every_location_has_rates():
    assert set(LOCATION_RATES) == set(TouLocation)
    for rates in LOCATION_RATES.values():
        assert rates.off < rates.mid < rates.peak


def test_resolve_by_location():
    assert resolve_tou_rates(TouLocation.SEATTLE) == TouRates(
        off=Decimal("0.0828"), mid=Decimal("0.1449"), peak=Decimal("0.1656")
    )
    assert resolve_tou_rates(TouLocation("other")).peak == Decimal("0.1788")


def test_resolve_explicit_rates():
    rates = resolve_tou_rates(off=Decimal("0.01"), mid=Decimal("0.02"), peak=Decimal("0.03"))
    assert rates == TouRates(off=Decimal("0.01"), mid=Decimal("0.02"), peak=Decimal("0.03"))


def test_resolve_requires_a_rate_source():
    with pytest.raises(ValueError, match="required"):
        resolve_tou_rates()


def test_resolve_rejects_partial_rates():
    with pytest.raises(ValueError, match="Missing TOU rates: off-peak"):
        resolve_tou_rates(mid=Decimal("0.02"), peak=Decimal("0.03"))


def test_resolve_rejects_location_with_rates():
    with pytest.raises(ValueError, match="not both"):
        resolve_tou_rates(TouLocation.RENTON, peak=Decimal("0.03"))
