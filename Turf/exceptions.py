import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class SlotAlreadyBooked(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "This slot is already booked"
    default_code = "slot_already_booked"


class InvalidBookingTransition(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Booking cannot move to the requested status"
    default_code = "invalid_booking_transition"


class MissingWhatsAppNumber(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "No WhatsApp number on file for this booking"
    default_code = "missing_whatsapp_number"


def booking_exception_handler(exc, context):
    """
    DRF exception handler that turns store failures into a 503.
    Everything else goes through DRF's default handling.
    """
    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.error(
            "Booking store error in %s: %s",
            view.__class__.__name__ if view else "unknown view",
            exc,
        )
        return Response(
            {
                "status": "failed",
                "message": "Booking store is unavailable. Please try again.",
            },
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return exception_handler(exc, context)
