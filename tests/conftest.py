# tests/conftest.py
from datetime import date

import pytest
from rest_framework.test import APIClient

from Turf.models import Booking, Turf

SATURDAY = date(2030, 6, 1)
SUNDAY = date(2030, 6, 2)
MONDAY = date(2030, 6, 3)
WEDNESDAY = date(2030, 6, 5)

ADMIN_EMAIL = "admin@pavallion.test"


@pytest.fixture(autouse=True)
def booking_settings(settings):
    settings.TURF_BOOKING = {
        "ADMIN_EMAILS": [ADMIN_EMAIL],
        "BUSINESS_WHATSAPP_NUMBER": "+91 90000 00000",
        "CURRENCY_SYMBOL": "₹",
    }
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
    return settings


@pytest.fixture
def api_client():
    return APIClient()


# -- Factories --
@pytest.fixture
def make_user(django_user_model):
    def _make_user(email="player@example.com", full_name="Player One",
                   phone_number="+919876543210", password="secret-pass-1"):
        return django_user_model.objects.create_user(
            email=email,
            password=password,
            full_name=full_name,
            phone_number=phone_number,
        )
    return _make_user


@pytest.fixture
def make_turf(db):
    def _make_turf(name="Pavallion Sports Arena T1", price=1000, amenities=None):
        return Turf.objects.create(
            name=name,
            location="Mira Bhayandar",
            price=price,
            amenities=amenities if amenities is not None else ["Parking", "Floodlights"],
            image_id="turf-1",
        )
    return _make_turf


@pytest.fixture
def make_booking(db):
    def _make_booking(turf, day=SATURDAY, start="14:00", end="16:00", slot=None,
                      status=Booking.PENDING, user=None, user_name="Player One",
                      whatsapp_number="+919876543210"):
        booking = Booking(
            turf_id=turf.id if hasattr(turf, "id") else turf,
            date=day,
            whatsapp_number=whatsapp_number,
            user=user,
            user_name=user_name,
            status=status,
        )
        if slot:
            booking.time_slot = slot
        else:
            booking.start_time = start
            booking.end_time = end
            booking.time_range = f"{start} - {end}"
        booking.save()
        return booking
    return _make_booking


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def admin_user(make_user):
    return make_user(email=ADMIN_EMAIL, full_name="Turf Admin", phone_number="")


@pytest.fixture
def user_client(api_client, user):
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def admin_client(api_client, admin_user):
    api_client.force_authenticate(user=admin_user)
    return api_client
