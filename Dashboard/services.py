from Turf.models import Booking, Turf
from Turf.presentors import build_booking_payload
from Turf.service import summarize_booking, turf_lookup


class AdminDashboardService:
    """
    All dashboard-related queries live here.
    Views should NOT touch the database directly.
    """

    @staticmethod
    def get_profile(admin_user):
        return {
            "id": admin_user.id,
            "name": admin_user.full_name or "Admin",
            "email": admin_user.email,
        }

    @staticmethod
    def get_booking_overview(recent_limit=5):
        turfs = turf_lookup()
        pending = Booking.objects.filter(status=Booking.PENDING)
        pending_count = pending.count()

        recent_pending = [
            build_booking_payload(b, summarize_booking(b, turf=turfs.get(b.turf_id)))
            for b in pending.order_by("-created_at")[:recent_limit]
        ]

        return {
            "pending_count": pending_count,
            "pending_label": (
                "No pending requests" if pending_count == 0
                else f"{pending_count} pending request{'s' if pending_count != 1 else ''}"
            ),
            "confirmed_count": Booking.objects.filter(status=Booking.CONFIRMED).count(),
            "turf_count": Turf.objects.count(),
            "recent_pending": recent_pending,
        }

    @staticmethod
    def get_revenue_data(currency_symbol):
        # Derived from current base prices; nothing is snapshotted
        turfs = turf_lookup()
        total = sum(
            summarize_booking(b, turf=turfs.get(b.turf_id)).price
            for b in Booking.objects.filter(status=Booking.CONFIRMED)
        )

        return {
            "estimated_revenue": total,
            "display_revenue": f"{currency_symbol}{total:,}",
        }
