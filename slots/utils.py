# slots/utils.py
from .constants import HOURS_PER_DAY, LABEL_SEPARATOR, SLOT_CATALOG, SLOT_INDEX


def parse_hour(value):
    """
    "HH:MM" -> hour.
    Raises ValueError on anything that is not a clock string.
    """
    if ":" not in value:
        raise ValueError(f"Malformed time value: {value!r}")
    hour, _minute = value.split(":", 1)
    return int(hour)


def format_hour(hour):
    return f"{hour % HOURS_PER_DAY:02d}:00"


def split_label(label):
    """
    "HH:MM - HH:MM" -> ("HH:MM", "HH:MM")
    """
    start, sep, end = label.partition(LABEL_SEPARATOR)
    if not sep or ":" not in start or ":" not in end:
        raise ValueError(f"Malformed slot label: {label!r}")
    return start.strip(), end.strip()


def slot_start_hour(label):
    start, _end = split_label(label)
    return parse_hour(start)


def make_label(start, end):
    return f"{start}{LABEL_SEPARATOR}{end}"


def unit_label(hour):
    return make_label(format_hour(hour), format_hour(hour + 1))


def is_catalog_slot(label):
    return label in SLOT_INDEX


def is_catalog_boundary(value):
    try:
        hour = parse_hour(value)
    except ValueError:
        return False
    return value == format_hour(hour) and 0 <= hour < HOURS_PER_DAY


def range_length(start_time, end_time):
    """
    Number of one-hour units from start_time up to end_time on the 24h ring.
    Never zero: equal endpoints mean a whole day.
    """
    steps = (parse_hour(end_time) - parse_hour(start_time)) % HOURS_PER_DAY
    return steps or HOURS_PER_DAY


def expand_range(start_time, end_time):
    """
    Unit slot labels covering [start_time, end_time), wrapping past midnight.
    """
    start_hour = parse_hour(start_time)
    return [
        unit_label(start_hour + offset)
        for offset in range(range_length(start_time, end_time))
    ]


def catalog_position(label):
    return SLOT_INDEX[label]


def ordered_catalog():
    return list(SLOT_CATALOG)
