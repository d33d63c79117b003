import re

from rest_framework import serializers

WHATSAPP_NUMBER_RE = re.compile(r"^\+?[1-9]\d{9,14}$")


def normalize_whatsapp_number(value):
    """
    Strip whitespace and check the number can be used in a wa.me link.
    """
    number = re.sub(r"\s", "", value or "")
    if len(number) < 10:
        raise serializers.ValidationError("Please enter a valid WhatsApp number.")
    if not WHATSAPP_NUMBER_RE.match(number):
        raise serializers.ValidationError("Invalid phone number format.")
    return number
