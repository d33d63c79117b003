import logging

from django.core.exceptions import ValidationError

from slots.services import merge_to_range, occupied_slots, timing_price
from Turf.exceptions import InvalidBookingTransition
from Turf.models import Booking, Turf
from Turf.presentors import UNKNOWN_TIME, UNKNOWN_TURF, BookingSummary

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# READS
# -------------------------------------------------------------------
def turf_lookup():
    return {turf.id: turf for turf in Turf.objects.all()}


def bookings_for(turf_id, day):
    """
    Fresh snapshot of every booking for a turf on a date, any status.
    """
    return list(Booking.objects.filter(turf_id=turf_id, date=day))


def booked_slots(turf_id, day):
    return occupied_slots(bookings_for(turf_id, day))


def summarize_booking(booking, turf=None):
    """
    Display values for a booking. Prices are recomputed from the
    turf's current base price.
    """
    if turf is None:
        turf = Turf.objects.filter(id=booking.turf_id).first()

    try:
        timing = booking.timing
    except ValidationError:
        return BookingSummary(
            turf_name=turf.name if turf else UNKNOWN_TURF,
            date=booking.date,
            time_display=UNKNOWN_TIME,
            price=0,
        )

    if turf is None:
        return BookingSummary(
            turf_name=UNKNOWN_TURF,
            date=booking.date,
            time_display=timing.label,
            price=0,
        )

    return BookingSummary(
        turf_name=turf.name,
        date=booking.date,
        time_display=timing.label,
        price=timing_price(turf, timing, booking.date),
    )


# -------------------------------------------------------------------
# WRITES
# -------------------------------------------------------------------
def create_booking(turf, day, slot_labels, whatsapp_number, user, user_name,
                   status=Booking.PENDING):
    """
    Store one range booking covering the (contiguous) slot selection.
    No overlap lock: concurrent requests for the same slots can both land.
    """
    slot_range = merge_to_range(slot_labels)

    booking = Booking(
        turf=turf,
        date=day,
        whatsapp_number=whatsapp_number,
        user=user,
        user_name=user_name,
        status=status,
    )
    booking.set_range(slot_range)
    booking.full_clean()
    booking.save()

    logger.info(
        "Created %s booking %s for turf %s on %s (%s)",
        status, booking.id, turf.id, day, slot_range.label,
    )
    return booking


def confirm_booking(booking):
    if booking.status != Booking.PENDING:
        raise InvalidBookingTransition(
            f"Booking is already {booking.status}"
        )

    booking.status = Booking.CONFIRMED
    booking.save(update_fields=["status"])
    logger.info("Confirmed booking %s", booking.id)
    return booking


def delete_booking(booking):
    booking_id = booking.id
    booking.delete()
    logger.info("Deleted booking %s", booking_id)


def delete_turf(turf):
    # Bookings keep their dangling turf reference
    turf_id = turf.id
    turf.delete()
    logger.info("Deleted turf %s", turf_id)
