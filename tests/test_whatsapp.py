from datetime import date
from urllib.parse import parse_qs, urlparse

import pytest

from Turf.exceptions import MissingWhatsAppNumber
from Turf.presentors import BookingSummary
from Turf.whatsapp import (
    BookingMessenger,
    MessagingConfig,
    build_whatsapp_url,
    digits_only,
    format_booking_date,
    get_messenger,
)

summary = BookingSummary(
    turf_name="Pavallion Sports Arena T1",
    date=date(2030, 6, 1),
    time_display="19:00 - 21:00",
    price=3600,
)


def test_digits_only():
    assert digits_only("+91 98765-43210") == "919876543210"


def test_format_booking_date():
    assert format_booking_date(date(2030, 6, 1)) == "June 1, 2030"


def test_url_encodes_message():
    url = build_whatsapp_url("+91 98765 43210", "Hi & bye?")
    assert url == "https://wa.me/919876543210?text=Hi%20%26%20bye%3F"


def test_request_link_targets_business_number():
    messenger = BookingMessenger(MessagingConfig(business_number="+91 90000 00000"))
    url = messenger.request_link(summary, "+919876543210")

    parsed = urlparse(url)
    assert parsed.netloc == "wa.me"
    assert parsed.path == "/919000000000"
    text = parse_qs(parsed.query)["text"][0]
    assert text == (
        "Hi! I'd like to request a booking for Pavallion Sports Arena T1 on "
        "June 1, 2030 from 19:00 - 21:00 for ₹3600. My WhatsApp number is "
        "+919876543210. Please confirm."
    )


def test_confirmation_link_targets_customer():
    messenger = BookingMessenger(MessagingConfig(business_number="1", currency_symbol="Rs."))
    url = messenger.confirmation_link(summary, "Asha", "+91 98765 43210")

    parsed = urlparse(url)
    assert parsed.path == "/919876543210"
    text = parse_qs(parsed.query)["text"][0]
    assert text == (
        "Hi Asha! Your booking for Pavallion Sports Arena T1 on June 1, 2030 "
        "from 19:00 - 21:00 (Rs.3600) has been confirmed. Thank you!"
    )


def test_messenger_reads_settings():
    messenger = get_messenger()
    assert messenger.config.business_number == "+91 90000 00000"
    assert messenger.config.currency_symbol == "₹"


@pytest.mark.parametrize("number", ["N/A (Admin)", "", None])
def test_no_link_without_recipient_digits(number):
    messenger = BookingMessenger(MessagingConfig(business_number="+91 90000 00000"))
    with pytest.raises(MissingWhatsAppNumber):
        messenger.confirmation_link(summary, "Asha", number)
