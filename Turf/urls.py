from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import (
    BookingConfirmationLinkView,
    BookingConfirmView,
    BookingRequestView,
    BookingViewSet,
    ManualBookingView,
    TurfAvailabilityView,
    TurfViewSet,
)

router = DefaultRouter()
router.register("turfs", TurfViewSet, basename="turf")
router.register("bookings", BookingViewSet, basename="booking")

# Explicit booking routes come first so "request"/"manual" are not read as ids
urlpatterns = [
    path("turfs/<int:turf_id>/availability/", TurfAvailabilityView.as_view(), name="turf-availability"),
    path("bookings/request/", BookingRequestView.as_view(), name="booking-request"),
    path("bookings/manual/", ManualBookingView.as_view(), name="booking-manual"),
    path("bookings/<int:booking_id>/confirm/", BookingConfirmView.as_view(), name="booking-confirm"),
    path(
        "bookings/<int:booking_id>/confirmation-link/",
        BookingConfirmationLinkView.as_view(),
        name="booking-confirmation-link",
    ),
    path("", include(router.urls)),
]
