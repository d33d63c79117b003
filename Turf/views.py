import logging

from django.shortcuts import get_object_or_404
from rest_framework import mixins, permissions, status, viewsets
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from Accounts.identity import get_identity_provider
from Accounts.permissions import IsBookingAdmin, IsBookingAdminOrReadOnly
from slots.serializers import AvailabilityQuerySerializer
from slots.services import build_slots_response
from .models import Booking, Turf
from .presentors import build_booking_payload
from .serializers import (
    BookingRequestSerializer,
    BookingSerializer,
    BookingStatusQuerySerializer,
    ManualBookingSerializer,
    TurfSerializer,
)
from .service import (
    bookings_for,
    confirm_booking,
    create_booking,
    delete_booking,
    delete_turf,
    summarize_booking,
    turf_lookup,
)
from .whatsapp import get_messenger, has_whatsapp_number

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# TURFS (PUBLIC READ, ADMIN WRITE)
# -------------------------------------------------------------------
class TurfViewSet(viewsets.ModelViewSet):
    """
    Public list/detail.
    Admin create, replace (PUT) and delete.
    """
    queryset = Turf.objects.all()
    serializer_class = TurfSerializer
    permission_classes = [IsBookingAdminOrReadOnly]
    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    def perform_create(self, serializer):
        turf = serializer.save()
        logger.info("Created turf %s (%s)", turf.id, turf.name)

    def perform_update(self, serializer):
        turf = serializer.save()
        logger.info("Replaced turf %s", turf.id)

    def perform_destroy(self, instance):
        delete_turf(instance)


# -------------------------------------------------------------------
# TURF AVAILABILITY (DATE-BASED SLOT CHECK)
# -------------------------------------------------------------------
class TurfAvailabilityView(APIView):
    """
    Public API
    Returns occupied slots and per-slot prices for a turf on a given date
    """
    permission_classes = [AllowAny]

    def get(self, request, turf_id):
        serializer = AvailabilityQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)

        selected_date = serializer.validated_data["date"]
        turf = get_object_or_404(Turf, id=turf_id)

        data = build_slots_response(
            turf,
            selected_date,
            bookings_for(turf.id, selected_date),
            duration=serializer.validated_data.get("duration"),
        )

        return Response({"status": "success", "data": data})


# -------------------------------------------------------------------
# BOOKING REQUEST (CUSTOMER -> PENDING)
# -------------------------------------------------------------------
class BookingRequestView(APIView):
    """
    Authenticated API
    Stores a pending booking and returns the WhatsApp link to the business
    """
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):
        serializer = BookingRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        user = request.user
        turf = data["turf_id"]

        booking = create_booking(
            turf=turf,
            day=data["date"],
            slot_labels=data["slots"],
            whatsapp_number=data["whatsapp_number"],
            user=user,
            user_name=user.full_name or "Unknown User",
        )

        summary = summarize_booking(booking, turf=turf)
        whatsapp_url = get_messenger().request_link(summary, data["whatsapp_number"])

        return Response({
            "status": "success",
            "message": "Booking requested. Proceed to WhatsApp to confirm with the admin.",
            "data": build_booking_payload(booking, summary, whatsapp_url=whatsapp_url),
        }, status=status.HTTP_201_CREATED)


# -------------------------------------------------------------------
# MANUAL BOOKING (ADMIN -> CONFIRMED)
# -------------------------------------------------------------------
class ManualBookingView(APIView):
    permission_classes = [IsBookingAdmin]

    def post(self, request):
        serializer = ManualBookingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        turf = data["turf_id"]
        booking = create_booking(
            turf=turf,
            day=data["date"],
            slot_labels=data["slots"],
            whatsapp_number=data["whatsapp_number"],
            user=request.user,
            user_name=data.get("user_name") or request.user.full_name or "Admin",
            status=Booking.CONFIRMED,
        )

        summary = summarize_booking(booking, turf=turf)
        return Response({
            "status": "success",
            "message": f"Successfully created booking for {summary.time_display}.",
            "data": build_booking_payload(booking, summary),
        }, status=status.HTTP_201_CREATED)


# -------------------------------------------------------------------
# BOOKING LIST / DETAIL / DELETE
# -------------------------------------------------------------------
class BookingViewSet(mixins.ListModelMixin,
                     mixins.RetrieveModelMixin,
                     mixins.DestroyModelMixin,
                     viewsets.GenericViewSet):
    """
    Users see only their bookings
    Admins see all
    """
    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAuthenticated]

    def is_admin(self):
        return get_identity_provider().is_admin(self.request.user)

    def get_queryset(self):
        qs = Booking.objects.all()
        if not self.is_admin():
            qs = qs.filter(user=self.request.user)

        query = BookingStatusQuerySerializer(data=self.request.query_params)
        query.is_valid(raise_exception=True)
        if "status" in query.validated_data:
            qs = qs.filter(status=query.validated_data["status"])
        return qs

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context["turfs"] = turf_lookup()
        return context

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response({"status": "success", "data": serializer.data})

    def retrieve(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object())
        return Response({"status": "success", "data": serializer.data})

    def perform_destroy(self, instance):
        # Owners may withdraw a pending request; admins may delete anything
        if not self.is_admin() and not instance.is_pending:
            raise PermissionDenied("Confirmed bookings can only be removed by an admin")
        delete_booking(instance)


# -------------------------------------------------------------------
# BOOKING CONFIRMATION (ADMIN)
# -------------------------------------------------------------------
class BookingConfirmView(APIView):
    """
    Admin API
    pending -> confirmed, returns the WhatsApp link to the customer
    """
    permission_classes = [IsBookingAdmin]

    def post(self, request, booking_id):
        booking = get_object_or_404(Booking, id=booking_id)
        confirm_booking(booking)

        summary = summarize_booking(booking)
        if has_whatsapp_number(booking.whatsapp_number):
            whatsapp_url = get_messenger().confirmation_link(
                summary, booking.user_name, booking.whatsapp_number
            )
            message = "Booking confirmed. Send the confirmation via WhatsApp."
        else:
            whatsapp_url = None
            message = "Booking confirmed. No WhatsApp number on file for this customer."

        return Response({
            "status": "success",
            "message": message,
            "data": build_booking_payload(booking, summary, whatsapp_url=whatsapp_url),
        }, status=status.HTTP_200_OK)


class BookingConfirmationLinkView(APIView):
    """
    Admin API
    Rebuilds the confirmation link without touching the booking
    """
    permission_classes = [IsBookingAdmin]

    def get(self, request, booking_id):
        booking = get_object_or_404(Booking, id=booking_id)

        summary = summarize_booking(booking)
        whatsapp_url = get_messenger().confirmation_link(
            summary, booking.user_name, booking.whatsapp_number
        )

        return Response({
            "status": "success",
            "data": {"booking_id": booking.id, "whatsapp_url": whatsapp_url},
        })
