"""WhatsApp deep links used as the booking notification channel."""

import re
from dataclasses import dataclass
from urllib.parse import quote

from django.conf import settings

from Turf.exceptions import MissingWhatsAppNumber

WA_ME_URL = "https://wa.me/{number}?text={text}"


@dataclass(frozen=True)
class MessagingConfig:
    business_number: str
    currency_symbol: str = "₹"

    @classmethod
    def from_settings(cls):
        booking = settings.TURF_BOOKING
        return cls(
            business_number=booking["BUSINESS_WHATSAPP_NUMBER"],
            currency_symbol=booking.get("CURRENCY_SYMBOL", "₹"),
        )


def digits_only(number):
    return re.sub(r"\D", "", number or "")


def format_booking_date(day):
    # e.g. "June 7, 2025"
    return f"{day.strftime('%B')} {day.day}, {day.year}"


def has_whatsapp_number(number):
    return bool(digits_only(number))


def build_whatsapp_url(number, message):
    """
    wa.me link to `number` prefilled with `message`.
    A link without a recipient is never built (placeholders like
    "N/A (Admin)" carry no digits).
    """
    recipient = digits_only(number)
    if not recipient:
        raise MissingWhatsAppNumber()
    return WA_ME_URL.format(number=recipient, text=quote(message, safe=""))


class BookingMessenger:
    """Builds the request and confirmation links for a booking."""

    def __init__(self, config: MessagingConfig):
        self.config = config

    def _amount(self, price):
        return f"{self.config.currency_symbol}{price}"

    def request_message(self, turf_name, day, time_display, price, customer_number):
        return (
            f"Hi! I'd like to request a booking for {turf_name} on "
            f"{format_booking_date(day)} from {time_display} for "
            f"{self._amount(price)}. My WhatsApp number is {customer_number}. "
            f"Please confirm."
        )

    def confirmation_message(self, customer_name, turf_name, day, time_display, price):
        return (
            f"Hi {customer_name}! Your booking for {turf_name} on "
            f"{format_booking_date(day)} from {time_display} "
            f"({self._amount(price)}) has been confirmed. Thank you!"
        )

    def request_link(self, summary, customer_number):
        message = self.request_message(
            summary.turf_name, summary.date, summary.time_display,
            summary.price, customer_number,
        )
        return build_whatsapp_url(self.config.business_number, message)

    def confirmation_link(self, summary, customer_name, customer_number):
        message = self.confirmation_message(
            customer_name, summary.turf_name, summary.date,
            summary.time_display, summary.price,
        )
        return build_whatsapp_url(customer_number, message)


def get_messenger():
    return BookingMessenger(MessagingConfig.from_settings())
