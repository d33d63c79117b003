from dataclasses import dataclass

from .utils import make_label


@dataclass(frozen=True)
class LegacySlotBooking:
    """Booking stored against a single catalog slot label."""

    slot: str

    @property
    def label(self):
        return self.slot


@dataclass(frozen=True)
class RangeBooking:
    """Booking stored as one merged range of consecutive catalog slots."""

    start: str
    end: str
    range: str = ""

    @property
    def label(self):
        return self.range or make_label(self.start, self.end)


@dataclass(frozen=True)
class SlotRange:
    start: str
    end: str
    label: str
