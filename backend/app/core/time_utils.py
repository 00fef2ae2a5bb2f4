import math
from datetime import date, timedelta


def monday_of(d: date) -> date:
    # Monday = 0, Sunday = 6
    return d - timedelta(days=d.weekday())


def week_bounds(d: date) -> tuple[date, date]:
    """
    Return (monday, sunday) of the ISO week containing `d`.
    Example: 2026-02-05 -> (2026-02-02, 2026-02-08)
    The last week of the calendar is cut off at date.max.
    """
    start = monday_of(d)
    if date.max - start < timedelta(days=6):
        return start, date.max
    return start, start + timedelta(days=6)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.
    Example: 97.5 -> 98, 94.4 -> 94
    """
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)
