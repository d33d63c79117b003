from types import SimpleNamespace

import pytest

from slots.constants import PEAK_SURCHARGE, SLOT_CATALOG, WEEKEND_SURCHARGE
from slots.pricing import is_peak_slot, price_for_range, price_for_slot
from tests.conftest import MONDAY, SATURDAY, SUNDAY, WEDNESDAY

turf = SimpleNamespace(id=1, name="Arena", price=1000)


@pytest.mark.parametrize("label", SLOT_CATALOG)
def test_no_date_returns_base_price(label):
    assert price_for_slot(turf, label) == 1000


@pytest.mark.parametrize("day", [SATURDAY, SUNDAY])
def test_weekend_off_peak_adds_weekend_surcharge(day):
    assert price_for_slot(turf, "09:00 - 10:00", day) == 1000 + WEEKEND_SURCHARGE


@pytest.mark.parametrize("label", ["18:00 - 19:00", "21:00 - 22:00", "23:00 - 00:00"])
def test_weekday_peak_adds_peak_surcharge(label):
    assert price_for_slot(turf, label, WEDNESDAY) == 1000 + PEAK_SURCHARGE


def test_weekday_off_peak_is_base_price():
    assert price_for_slot(turf, "17:00 - 18:00", MONDAY) == 1000


def test_weekend_peak_adds_both_surcharges():
    assert price_for_slot(turf, "19:00 - 20:00", SATURDAY) == 1800


def test_peak_window_bounds():
    assert not is_peak_slot("17:00 - 18:00")
    assert is_peak_slot("18:00 - 19:00")
    assert is_peak_slot("23:00 - 00:00")
    assert not is_peak_slot("00:00 - 01:00")


def test_malformed_label_fails_fast():
    with pytest.raises(ValueError):
        price_for_slot(turf, "evening", SATURDAY)
    with pytest.raises(ValueError):
        price_for_slot(turf, "evening")


def test_range_wrapping_midnight_prices_one_unit():
    assert price_for_range(turf, "23:00", "00:00", SATURDAY) == price_for_slot(
        turf, "23:00 - 00:00", SATURDAY
    )


def test_range_sums_unit_prices():
    # 17:00 off-peak, 18:00 and 19:00 peak, weekday
    assert price_for_range(turf, "17:00", "20:00", MONDAY) == 1000 + 2 * 1500


def test_range_across_midnight():
    # 22:00, 23:00 peak; 00:00 off-peak
    assert price_for_range(turf, "22:00", "01:00", WEDNESDAY) == 1500 + 1500 + 1000


def test_equal_endpoints_price_a_full_day():
    assert price_for_range(turf, "06:00", "06:00") == 24 * 1000


def test_range_without_date_uses_base_prices():
    assert price_for_range(turf, "18:00", "21:00") == 3000


@pytest.mark.parametrize("start, end", [("09:30", "11:00"), ("09:00", "10:15"), ("24:00", "01:00"), ("9", "10:00")])
def test_range_rejects_off_catalog_bounds(start, end):
    with pytest.raises(ValueError):
        price_for_range(turf, start, end, MONDAY)
