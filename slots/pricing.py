from .constants import (
    PEAK_END_HOUR,
    PEAK_START_HOUR,
    PEAK_SURCHARGE,
    WEEKEND_DAYS,
    WEEKEND_SURCHARGE,
)
from .utils import expand_range, is_catalog_boundary, slot_start_hour


def is_weekend(day):
    return day.weekday() in WEEKEND_DAYS


def is_peak_slot(slot_label):
    return PEAK_START_HOUR <= slot_start_hour(slot_label) <= PEAK_END_HOUR


def price_for_slot(turf, slot_label, date=None):
    """
    Base price plus the peak and weekend surcharges.
    Without a date the base price is returned as is.
    """
    # Validates the label even in the no-date path
    peak = is_peak_slot(slot_label)

    if date is None:
        return turf.price

    price = turf.price
    if peak:
        price += PEAK_SURCHARGE
    if is_weekend(date):
        price += WEEKEND_SURCHARGE
    return price


def price_for_range(turf, start_time, end_time, date=None):
    for bound in (start_time, end_time):
        if not is_catalog_boundary(bound):
            raise ValueError(f"Not a slot boundary: {bound!r}")

    return sum(
        price_for_slot(turf, label, date)
        for label in expand_range(start_time, end_time)
    )


def price_for_slots(turf, slot_labels, date=None):
    return sum(price_for_slot(turf, label, date) for label in slot_labels)
