from dataclasses import dataclass
from datetime import date as date_type

UNKNOWN_TURF = "Unknown"
UNKNOWN_TIME = "Unknown time"


@dataclass(frozen=True)
class BookingSummary:
    """What the admin list and the WhatsApp messages show for a booking."""

    turf_name: str
    date: date_type
    time_display: str
    price: int


def build_booking_payload(booking, summary, **extra):
    payload = {
        "id": booking.id,
        "turf_id": booking.turf_id,
        "turf_name": summary.turf_name,
        "date": booking.date.isoformat(),
        "time": summary.time_display,
        "price": summary.price,
        "status": booking.status,
        "user_name": booking.user_name,
        "whatsapp_number": booking.whatsapp_number,
    }
    payload.update(extra)
    return payload
