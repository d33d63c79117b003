from django.utils import timezone
from rest_framework import serializers

from Accounts.validators import normalize_whatsapp_number
from slots.serializers import SlotSelectionField
from slots.services import range_payload, suggest_alternatives
from Turf.exceptions import SlotAlreadyBooked
from .models import Booking, Turf
from .presentors import build_booking_payload
from .service import booked_slots, summarize_booking

AMENITY_CHOICES = ("Floodlights", "Washroom", "Parking", "Equipments", "Gallery")

ADMIN_PLACEHOLDER_NUMBER = "N/A (Admin)"


# =========================================================
# TURF SERIALIZER (ADMIN WRITES REPLACE THE WHOLE RECORD)
# =========================================================
class TurfSerializer(serializers.ModelSerializer):

    amenities = serializers.ListField(
        child=serializers.ChoiceField(choices=AMENITY_CHOICES),
        allow_empty=True,
    )

    class Meta:
        model = Turf
        fields = (
            "id",
            "name",
            "location",
            "price",
            "amenities",
            "image_id",
        )

    def validate_price(self, value):
        if value <= 0:
            raise serializers.ValidationError("Price must be greater than zero")
        return value

    def validate_amenities(self, value):
        # Keep first occurrence order
        return list(dict.fromkeys(value))


# =========================================================
# BOOKING REQUEST (CUSTOMER)
# =========================================================
class BookingRequestSerializer(serializers.Serializer):
    turf_id = serializers.PrimaryKeyRelatedField(
        queryset=Turf.objects.all(),
        error_messages={"does_not_exist": "Please select a turf."},
    )
    date = serializers.DateField(
        error_messages={"required": "A date is required."}
    )
    slots = SlotSelectionField(
        error_messages={"min_length": "Please select at least one time slot."}
    )
    whatsapp_number = serializers.CharField()

    allow_past_dates = False

    def validate_whatsapp_number(self, value):
        return normalize_whatsapp_number(value)

    def validate_date(self, value):
        if not self.allow_past_dates and value < timezone.localdate():
            raise serializers.ValidationError("Cannot book past dates")
        return value

    def validate(self, data):
        # Advisory only: another request can still land between this
        # check and the write.
        taken = booked_slots(data["turf_id"].id, data["date"])
        clashes = [slot for slot in data["slots"] if slot in taken]
        if clashes:
            alternatives = suggest_alternatives(
                taken, len(data["slots"]), anchor=data["slots"][0]
            )
            raise SlotAlreadyBooked({
                "detail": f"The following time slots are already booked: {', '.join(clashes)}",
                "booked_slots": clashes,
                "alternatives": [range_payload(window) for window in alternatives],
            })
        return data


# =========================================================
# MANUAL BOOKING (ADMIN)
# =========================================================
class ManualBookingSerializer(BookingRequestSerializer):
    whatsapp_number = serializers.CharField(required=False, allow_blank=True, default="")
    user_name = serializers.CharField(required=False, allow_blank=True)

    allow_past_dates = True

    def validate_whatsapp_number(self, value):
        if not value or not value.strip():
            return ADMIN_PLACEHOLDER_NUMBER
        return normalize_whatsapp_number(value)


# =========================================================
# BOOKING READ SERIALIZER
# =========================================================
class BookingSerializer(serializers.BaseSerializer):
    """
    Read-only booking representation with derived turf name and price.
    Pass a turf lookup as context["turfs"] to avoid one query per row.
    """

    def to_representation(self, instance):
        turfs = self.context.get("turfs")
        turf = turfs.get(instance.turf_id) if turfs is not None else None
        summary = summarize_booking(instance, turf=turf)
        return build_booking_payload(
            instance,
            summary,
            created_at=instance.created_at.isoformat() if instance.created_at else None,
        )


class BookingStatusQuerySerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=[choice for choice, _ in Booking.STATUS_CHOICES],
        required=False,
    )
