from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from slots.timing import LegacySlotBooking, RangeBooking
from slots.utils import is_catalog_boundary, is_catalog_slot, make_label


# =========================
# TURF (BUSINESS ASSET)
# =========================

class Turf(models.Model):
    """
    A bookable sports turf.
    Admin edits replace the whole record; deletes do not touch bookings.
    """

    name = models.CharField(max_length=100)
    location = models.CharField(max_length=255)

    # Base price per slot, before peak/weekend surcharges
    price = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    # Ordered amenity tags, e.g. ["Parking", "Floodlights"]
    amenities = models.JSONField(default=list)

    image_id = models.CharField(max_length=100, blank=True)

    class Meta:
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="turf_price_positive",
            ),
        ]

    def __str__(self):
        return self.name


# =========================
# BOOKING MODEL
# =========================

class Booking(models.Model):
    """
    A reservation request for one turf on one date.

    Timing is either a single legacy slot label (time_slot) or a merged
    range (start_time, end_time, time_range); see the `timing` property.
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"

    STATUS_CHOICES = [
        (PENDING, "Pending"),
        (CONFIRMED, "Confirmed"),
    ]

    # No FK constraint: a deleted turf leaves its bookings in place
    turf = models.ForeignKey(
        "Turf.Turf",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="bookings",
    )

    date = models.DateField()

    # Legacy shape
    time_slot = models.CharField(max_length=20, blank=True)

    # Current shape
    start_time = models.CharField(max_length=5, blank=True)
    end_time = models.CharField(max_length=5, blank=True)
    time_range = models.CharField(max_length=20, blank=True)

    whatsapp_number = models.CharField(max_length=32)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    user_name = models.CharField(max_length=255)

    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=PENDING
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-date", "-created_at"]
        indexes = [
            models.Index(fields=["turf", "date"], name="booking_turf_date_idx"),
        ]

    @property
    def timing(self):
        has_range = bool(self.start_time and self.end_time)
        if has_range and not self.time_slot:
            return RangeBooking(
                start=self.start_time,
                end=self.end_time,
                range=self.time_range,
            )
        if self.time_slot and not has_range:
            return LegacySlotBooking(slot=self.time_slot)
        raise ValidationError(
            "Booking must carry either a time slot or a start/end range"
        )

    def set_range(self, slot_range):
        self.start_time = slot_range.start
        self.end_time = slot_range.end
        self.time_range = slot_range.label
        self.time_slot = ""

    @property
    def turf_name(self):
        # Orphaned bookings survive turf deletion
        try:
            return self.turf.name
        except Turf.DoesNotExist:
            return "Unknown"

    @property
    def is_pending(self):
        return self.status == self.PENDING

    def clean(self):
        """
        Shape validation.
        Runs on full_clean() before save().
        """
        timing = self.timing

        if isinstance(timing, LegacySlotBooking):
            if not is_catalog_slot(timing.slot):
                raise ValidationError("Unknown time slot")

        elif isinstance(timing, RangeBooking):
            if not (is_catalog_boundary(timing.start) and is_catalog_boundary(timing.end)):
                raise ValidationError("Range must start and end on slot boundaries")
            if not self.time_range:
                self.time_range = make_label(timing.start, timing.end)

    def __str__(self):
        return f"{self.turf_id} | {self.date} | {self.time_range or self.time_slot}"
