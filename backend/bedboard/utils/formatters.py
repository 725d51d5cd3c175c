"""
Formatting helpers.
Presentation strings for prices, durations and bed labels.
"""
from typing import Union
from datetime import datetime

from bedboard.config import settings


# ============================================
# MONEY
# ============================================

def group_indian_digits(amount: Union[int, float]) -> str:
    """
    Groups digits the Indian way (last three, then pairs).

    Args:
        amount: Amount; fractions are rounded to the nearest unit

    Returns:
        Grouped string

    Examples:
        >>> group_indian_digits(6500)
        '6,500'
        >>> group_indian_digits(1250000)
        '12,50,000'
    """
    value = int(round(amount))
    sign = "-" if value < 0 else ""
    digits = str(abs(value))

    if len(digits) <= 3:
        return f"{sign}{digits}"

    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)

    return f"{sign}{','.join(pairs)},{tail}"


def format_price(amount: Union[int, float]) -> str:
    """
    Formats an amount with the configured currency symbol.

    Examples:
        >>> format_price(3500)
        '₹3,500'
    """
    return f"{settings.CURRENCY_SYMBOL}{group_indian_digits(amount)}"


def format_price_per_day(amount: Union[int, float]) -> str:
    """
    Formats a daily tariff.

    Examples:
        >>> format_price_per_day(6500)
        '₹6,500/day'
    """
    return f"{format_price(amount)}/day"


# ============================================
# TIME
# ============================================

MINUTES_IN_DAY = 1440
MINUTES_IN_MONTH = 43200
MINUTES_IN_YEAR = 525600


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_time_since(since: datetime, now: datetime) -> str:
    """
    Human distance between two instants, without suffix.

    Uses the same thresholds as the browser's date helpers so the panel
    reads "3 days" or "about 5 hours".

    Args:
        since: Earlier instant (e.g. admission time)
        now: Reference instant

    Returns:
        Readable distance

    Examples:
        >>> from datetime import timedelta
        >>> t = datetime(2024, 1, 10, 8, 0)
        >>> format_time_since(t, t + timedelta(minutes=20))
        '20 minutes'
        >>> format_time_since(t, t + timedelta(hours=5))
        'about 5 hours'
        >>> format_time_since(t, t + timedelta(days=3))
        '3 days'
    """
    seconds = max(0.0, (now - since).total_seconds())
    minutes = round(seconds / 60)

    if minutes < 1:
        return "less than a minute"
    if minutes < 45:
        return _plural(minutes, "minute")
    if minutes < 90:
        return "about 1 hour"
    if minutes < MINUTES_IN_DAY:
        return f"about {round(minutes / 60)} hours"
    if minutes < 2520:
        return "1 day"
    if minutes < MINUTES_IN_MONTH:
        return _plural(round(minutes / MINUTES_IN_DAY), "day")
    if minutes < 2 * MINUTES_IN_MONTH:
        return f"about {_plural(round(minutes / MINUTES_IN_MONTH), 'month')}"
    if minutes < MINUTES_IN_YEAR:
        return _plural(round(minutes / MINUTES_IN_MONTH), "month")

    years = minutes // MINUTES_IN_YEAR
    months_over = (minutes % MINUTES_IN_YEAR) / MINUTES_IN_MONTH
    if months_over < 3:
        return f"about {_plural(years, 'year')}"
    if months_over < 9:
        return f"over {_plural(years, 'year')}"
    return f"almost {_plural(years + 1, 'year')}"


# ============================================
# BEDS
# ============================================

def format_bed_chip(floor_id: str, ward_name: str, bed_number: str) -> str:
    """
    Label of a selected bed chip in the summary bar.

    Examples:
        >>> format_bed_chip("F3", "General Ward A", "3001")
        'F3 • General Ward A • Bed 3001'
    """
    return f"{floor_id} • {ward_name} • Bed {bed_number}"
