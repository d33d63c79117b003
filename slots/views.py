from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from slots.constants import PEAK_END_HOUR, PEAK_START_HOUR, PEAK_SURCHARGE, WEEKEND_SURCHARGE
from slots.pricing import price_for_range, price_for_slot
from slots.serializers import PriceQuoteSerializer
from slots.services import merge_to_range, range_payload, suggest_alternatives
from slots.utils import ordered_catalog
from Turf.service import booked_slots


class SlotCatalogView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({
            "status": "success",
            "data": {
                "slots": ordered_catalog(),
                "pricing": {
                    "peak_hours": {"from": PEAK_START_HOUR, "to": PEAK_END_HOUR},
                    "peak_surcharge": PEAK_SURCHARGE,
                    "weekend_surcharge": WEEKEND_SURCHARGE,
                },
            }
        })


class PriceQuoteView(APIView):
    """
    Public API
    Prices a contiguous slot selection before it is requested
    """
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = PriceQuoteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        turf = serializer.validated_data["turf_id"]
        selected_date = serializer.validated_data.get("date")
        slots = serializer.validated_data["slots"]

        slot_range = merge_to_range(slots)

        # Occupancy is only known for a concrete date
        clashes, alternatives = [], []
        if selected_date is not None:
            taken = booked_slots(turf.id, selected_date)
            clashes = [label for label in slots if label in taken]
            if clashes:
                alternatives = suggest_alternatives(taken, len(slots), anchor=slots[0])

        return Response({
            "status": "success",
            "data": {
                "turf_id": turf.id,
                "date": selected_date,
                "slots": [
                    {"label": label, "price": price_for_slot(turf, label, selected_date)}
                    for label in slots
                ],
                "range": range_payload(slot_range),
                "booked_slots": clashes,
                "alternatives": [range_payload(window) for window in alternatives],
                "slot_count": len(slots),
                "total_price": price_for_range(
                    turf, slot_range.start, slot_range.end, selected_date
                ),
            }
        }, status=status.HTTP_200_OK)
