# turf/admin.py

from django.contrib import admin

from .models import Booking, Turf
from .service import confirm_booking


# -------------------------------
# TURF ADMIN
# -------------------------------
@admin.register(Turf)
class TurfAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "name",
        "location",
        "price",          # Base price before surcharges
    )

    search_fields = ("name", "location")


# -------------------------------
# BOOKING ADMIN
# -------------------------------
# Admin view for all booking requests (pending first when filtered)
@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "turf_id",
        "date",
        "time_range",
        "time_slot",
        "user_name",
        "whatsapp_number",
        "status",
        "created_at",
    )

    list_filter = ("status", "date")

    search_fields = (
        "user_name",
        "whatsapp_number",
        "user__email",
    )

    date_hierarchy = "date"

    readonly_fields = ("created_at",)

    actions = ["confirm_selected"]

    @admin.action(description="Confirm selected pending bookings")
    def confirm_selected(self, request, queryset):
        confirmed = 0
        for booking in queryset.filter(status=Booking.PENDING):
            confirm_booking(booking)
            confirmed += 1
        self.message_user(request, f"{confirmed} booking(s) confirmed")
