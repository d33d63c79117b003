import pytest
from django.urls import reverse

from Turf.models import Booking, Turf
from Turf.service import summarize_booking
from tests.conftest import SATURDAY, WEDNESDAY

pytestmark = pytest.mark.django_db

TURF_PAYLOAD = {
    "name": "Pavallion Sports Arena T4",
    "location": "Mira Bhayandar",
    "price": 700,
    "amenities": ["Parking", "Washroom", "Parking"],
    "image_id": "turf-4",
}


def test_turf_list_is_public_and_ordered(api_client, make_turf):
    make_turf(name="Zeta Turf")
    make_turf(name="Alpha Turf")

    r = api_client.get(reverse("turf-list"))
    assert r.status_code == 200
    assert [t["name"] for t in r.json()] == ["Alpha Turf", "Zeta Turf"]


def test_admin_creates_turf(admin_client):
    r = admin_client.post(reverse("turf-list"), TURF_PAYLOAD, format="json")
    assert r.status_code == 201
    assert r.json()["amenities"] == ["Parking", "Washroom"]
    assert Turf.objects.get().price == 700


def test_non_admin_cannot_create_turf(user_client):
    r = user_client.post(reverse("turf-list"), TURF_PAYLOAD, format="json")
    assert r.status_code == 403


def test_turf_price_must_be_positive(admin_client):
    r = admin_client.post(reverse("turf-list"), {**TURF_PAYLOAD, "price": 0}, format="json")
    assert r.status_code == 400
    assert "price" in r.json()


def test_unknown_amenity_rejected(admin_client):
    r = admin_client.post(
        reverse("turf-list"), {**TURF_PAYLOAD, "amenities": ["Jacuzzi"]}, format="json"
    )
    assert r.status_code == 400


def test_put_replaces_whole_turf(admin_client, make_turf):
    turf = make_turf()
    r = admin_client.put(reverse("turf-detail", args=[turf.id]), TURF_PAYLOAD, format="json")
    assert r.status_code == 200

    turf.refresh_from_db()
    assert turf.name == "Pavallion Sports Arena T4"
    assert turf.amenities == ["Parking", "Washroom"]


def test_patch_is_not_allowed(admin_client, make_turf):
    turf = make_turf()
    r = admin_client.patch(reverse("turf-detail", args=[turf.id]), {"price": 900}, format="json")
    assert r.status_code == 405


def test_deleting_turf_orphans_bookings(admin_client, make_turf, make_booking):
    turf = make_turf()
    booking = make_booking(turf)

    r = admin_client.delete(reverse("turf-detail", args=[turf.id]))
    assert r.status_code == 204

    booking = Booking.objects.get(id=booking.id)
    assert booking.turf_name == "Unknown"
    summary = summarize_booking(booking)
    assert summary.turf_name == "Unknown"
    assert summary.price == 0
    assert summary.time_display == "14:00 - 16:00"


def test_availability_lists_occupied_slots(api_client, make_turf, make_booking):
    turf = make_turf()
    make_booking(turf, day=WEDNESDAY, start="14:00", end="16:00")
    make_booking(turf, day=WEDNESDAY, slot="20:00 - 21:00", status=Booking.CONFIRMED)
    make_booking(turf, day=SATURDAY, start="09:00", end="10:00")

    r = api_client.get(
        reverse("turf-availability", args=[turf.id]), {"date": WEDNESDAY.isoformat()}
    )
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["booked_slots"] == ["14:00 - 15:00", "15:00 - 16:00", "20:00 - 21:00"]
    assert data["turf_details"]["base_price"] == 1000


def test_availability_requires_date(api_client, make_turf):
    turf = make_turf()
    r = api_client.get(reverse("turf-availability", args=[turf.id]))
    assert r.status_code == 400


def test_availability_unknown_turf(api_client, db):
    r = api_client.get(reverse("turf-availability", args=[999]), {"date": "2030-06-01"})
    assert r.status_code == 404


def test_price_quote(api_client, make_turf):
    turf = make_turf()
    r = api_client.post(
        reverse("slot-quote"),
        {
            "turf_id": turf.id,
            "date": SATURDAY.isoformat(),
            "slots": ["19:00 - 20:00", "18:00 - 19:00"],
        },
        format="json",
    )
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["range"] == {"start": "18:00", "end": "20:00", "label": "18:00 - 20:00"}
    assert data["total_price"] == 3600
    assert [s["price"] for s in data["slots"]] == [1800, 1800]


def test_price_quote_without_date_uses_base_price(api_client, make_turf):
    turf = make_turf()
    r = api_client.post(
        reverse("slot-quote"),
        {"turf_id": turf.id, "slots": ["18:00 - 19:00"]},
        format="json",
    )
    assert r.status_code == 200
    assert r.json()["data"]["total_price"] == 1000


def test_price_quote_rejects_gaps(api_client, make_turf):
    turf = make_turf()
    r = api_client.post(
        reverse("slot-quote"),
        {"turf_id": turf.id, "slots": ["09:00 - 10:00", "11:00 - 12:00"]},
        format="json",
    )
    assert r.status_code == 400
    assert r.json()["slots"] == ["Please select consecutive time slots only"]


def test_slot_catalog(api_client):
    r = api_client.get(reverse("slot-catalog"))
    data = r.json()["data"]
    assert data["slots"][0] == "00:00 - 01:00"
    assert data["slots"][-1] == "23:00 - 00:00"
    assert data["pricing"]["peak_surcharge"] == 500


def test_availability_ignores_rows_without_timing(api_client, make_turf, make_booking):
    turf = make_turf()
    make_booking(turf, day=WEDNESDAY, slot="10:00 - 11:00")
    Booking.objects.create(turf_id=turf.id, date=WEDNESDAY, whatsapp_number="+919876543210")

    r = api_client.get(
        reverse("turf-availability", args=[turf.id]), {"date": WEDNESDAY.isoformat()}
    )
    assert r.status_code == 200
    assert r.json()["data"]["booked_slots"] == ["10:00 - 11:00"]


def test_price_quote_offers_alternatives_when_taken(api_client, make_turf, make_booking):
    turf = make_turf()
    make_booking(turf, day=SATURDAY, slot="19:00 - 20:00")
    r = api_client.post(
        reverse("slot-quote"),
        {
            "turf_id": turf.id,
            "date": SATURDAY.isoformat(),
            "slots": ["18:00 - 19:00", "19:00 - 20:00"],
        },
        format="json",
    )
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["booked_slots"] == ["19:00 - 20:00"]
    assert [w["label"] for w in data["alternatives"]] == [
        "17:00 - 19:00", "16:00 - 18:00", "20:00 - 22:00"
    ]


def test_availability_lists_free_windows_for_duration(api_client, make_turf, make_booking):
    turf = make_turf()
    make_booking(turf, day=WEDNESDAY, start="14:00", end="16:00")

    r = api_client.get(
        reverse("turf-availability", args=[turf.id]),
        {"date": WEDNESDAY.isoformat(), "duration": 12},
    )
    assert r.status_code == 200
    assert [w["label"] for w in r.json()["data"]["free_windows"]] == [
        "00:00 - 12:00", "01:00 - 13:00", "02:00 - 14:00"
    ]


def test_availability_rejects_oversized_duration(api_client, make_turf):
    turf = make_turf()
    r = api_client.get(
        reverse("turf-availability", args=[turf.id]),
        {"date": WEDNESDAY.isoformat(), "duration": 25},
    )
    assert r.status_code == 400
