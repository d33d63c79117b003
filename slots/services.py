import logging
from datetime import timedelta

from django.core.exceptions import ValidationError

from .constants import SLOT_CATALOG
from .pricing import price_for_range, price_for_slot
from .timing import LegacySlotBooking, RangeBooking, SlotRange
from .utils import catalog_position, expand_range, make_label, split_label

logger = logging.getLogger(__name__)


def is_contiguous(slot_labels):
    """
    True when the labels, sorted, form an unbroken chain in catalog order.
    """
    ordered = sorted(slot_labels)
    positions = [catalog_position(label) for label in ordered]
    return all(
        current == previous + 1
        for previous, current in zip(positions, positions[1:])
    )


def merge_to_range(slot_labels):
    """
    Collapse contiguous slot labels into one range.
    Contiguity is checked by the caller (see is_contiguous).
    """
    ordered = sorted(slot_labels)
    if not ordered:
        raise ValueError("Cannot merge an empty slot selection")

    start, _ = split_label(ordered[0])
    _, end = split_label(ordered[-1])
    return SlotRange(start=start, end=end, label=make_label(start, end))


def range_payload(slot_range):
    return {
        "start": slot_range.start,
        "end": slot_range.end,
        "label": slot_range.label,
    }


def suggest_alternatives(occupied, length, anchor=None, limit=3):
    """
    Free runs of `length` consecutive catalog slots, as SlotRanges.

    With an anchor slot label the runs closest to it come first (earlier
    wins a tie); without one they follow catalog order. Runs never wrap
    past midnight.
    `limit=None` returns every free run.
    """
    if not 1 <= length <= len(SLOT_CATALOG):
        raise ValueError(f"Window length out of range: {length!r}")

    free = [
        position
        for position in range(len(SLOT_CATALOG) - length + 1)
        if not any(
            label in occupied
            for label in SLOT_CATALOG[position:position + length]
        )
    ]

    if anchor is not None:
        origin = catalog_position(anchor)
        free.sort(key=lambda position: (abs(position - origin), position))

    return [
        merge_to_range(SLOT_CATALOG[position:position + length])
        for position in free[:limit]
    ]


def timing_slots(timing):
    if isinstance(timing, LegacySlotBooking):
        return [timing.slot]
    if isinstance(timing, RangeBooking):
        return expand_range(timing.start, timing.end)
    raise TypeError(f"Unsupported booking timing: {timing!r}")


def occupied_slots(bookings):
    """
    Slot labels taken by the given bookings (one turf, one date).
    Works on whatever snapshot is passed in; no I/O.
    """
    occupied = set()
    for booking in bookings:
        try:
            timing = booking.timing
        except ValidationError:
            # Rows with both timing shapes or neither block nothing
            logger.warning("Skipping booking %s with unreadable timing", booking.id)
            continue
        occupied.update(timing_slots(timing))
    return occupied


def timing_price(turf, timing, date=None):
    if isinstance(timing, LegacySlotBooking):
        return price_for_slot(turf, timing.slot, date)
    if isinstance(timing, RangeBooking):
        return price_for_range(turf, timing.start, timing.end, date)
    raise TypeError(f"Unsupported booking timing: {timing!r}")


def build_date_selector(selected_date):
    start_date = selected_date - timedelta(days=1)

    days = []
    for i in range(6):
        current = start_date + timedelta(days=i)
        days.append({
            "day_name": current.strftime("%a").upper(),
            "day_number": current.strftime("%d"),
            "full_date": current.isoformat(),
            "is_selected": current == selected_date
        })

    return {
        "current_date": selected_date.isoformat(),
        "month_label": selected_date.strftime("%B %Y"),
        "days": days
    }


def format_slot(idx, label, occupied, turf, selected_date):
    is_booked = label in occupied
    return {
        "id": f"slot_{idx:02}",
        "label": label,
        "status": "BOOKED" if is_booked else "AVAILABLE",
        "price": None if is_booked else price_for_slot(turf, label, selected_date),
        "is_selectable": not is_booked,
    }


def build_slots_response(turf, selected_date, bookings, duration=None):
    occupied = occupied_slots(bookings)

    slots = [
        format_slot(idx, label, occupied, turf, selected_date)
        for idx, label in enumerate(SLOT_CATALOG, start=1)
    ]

    data = {
        "turf_details": {
            "id": turf.id,
            "name": turf.name,
            "location": turf.location,
            "base_price": turf.price,
        },
        "date_selector": build_date_selector(selected_date),
        "booked_slots": sorted(occupied),
        "slots": slots
    }
    if duration:
        data["free_windows"] = [
            range_payload(window)
            for window in suggest_alternatives(occupied, duration, limit=None)
        ]
    return data
