# slots/constants.py
HOURS_PER_DAY = 24

# Saturday, Sunday (date.weekday())
WEEKEND_DAYS = {5, 6}

# Slot start hours attracting the peak surcharge (inclusive)
PEAK_START_HOUR = 18
PEAK_END_HOUR = 23

PEAK_SURCHARGE = 500
WEEKEND_SURCHARGE = 300

LABEL_SEPARATOR = " - "


def _hour_label(hour):
    return f"{hour % HOURS_PER_DAY:02d}:00"


# Ordered one-hour partition of the day: "00:00 - 01:00" ... "23:00 - 00:00"
SLOT_CATALOG = tuple(
    f"{_hour_label(hour)}{LABEL_SEPARATOR}{_hour_label(hour + 1)}"
    for hour in range(HOURS_PER_DAY)
)

SLOT_INDEX = {label: idx for idx, label in enumerate(SLOT_CATALOG)}
