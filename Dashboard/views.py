from django.conf import settings
from rest_framework.views import APIView
from rest_framework.response import Response

from Accounts.permissions import IsBookingAdmin
from .serializers import DashboardSerializer
from .services import AdminDashboardService


class AdminDashboardView(APIView):
    permission_classes = [IsBookingAdmin]

    def get(self, request):
        currency_symbol = settings.TURF_BOOKING.get("CURRENCY_SYMBOL", "₹")

        response_data = {
            "profile": AdminDashboardService.get_profile(request.user),
            "bookings": AdminDashboardService.get_booking_overview(),
            "revenue": AdminDashboardService.get_revenue_data(currency_symbol),
        }

        serializer = DashboardSerializer(response_data)

        return Response(
            {"status": "success", "data": serializer.data},
            status=200
        )
