# slots/serializers.py
from rest_framework import serializers

from Turf.models import Turf
from .constants import SLOT_CATALOG
from .services import is_contiguous
from .utils import is_catalog_slot


class SlotSelectionField(serializers.ListField):
    """
    One or more catalog slot labels forming a contiguous block.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault("child", serializers.CharField())
        kwargs.setdefault("min_length", 1)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        slots = super().to_internal_value(data)

        unknown = [s for s in slots if not is_catalog_slot(s)]
        if unknown:
            raise serializers.ValidationError(
                f"Unknown time slot(s): {', '.join(unknown)}"
            )

        if len(set(slots)) != len(slots):
            raise serializers.ValidationError("Duplicate time slots selected")

        if not is_contiguous(slots):
            raise serializers.ValidationError(
                "Please select consecutive time slots only"
            )

        return sorted(slots)


class AvailabilityQuerySerializer(serializers.Serializer):
    date = serializers.DateField()
    # Hours; when given, free runs of that length are listed too
    duration = serializers.IntegerField(
        required=False, min_value=1, max_value=len(SLOT_CATALOG)
    )


class PriceQuoteSerializer(serializers.Serializer):
    turf_id = serializers.PrimaryKeyRelatedField(
        queryset=Turf.objects.all()
    )
    # Without a date only base prices are quoted
    date = serializers.DateField(required=False, allow_null=True)
    slots = SlotSelectionField()
