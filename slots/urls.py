from django.urls import path
from .views import PriceQuoteView, SlotCatalogView

urlpatterns = [
    path("slots/catalog/", SlotCatalogView.as_view(), name="slot-catalog"),
    path("slots/quote/", PriceQuoteView.as_view(), name="slot-quote"),
]
