"""Human-readable renderings of analytics values."""

from __future__ import annotations


def format_duration(seconds: float) -> str:
    """Render a call duration as "0 min", "12 min", "2 hr" or "1 hr 5 min"."""
    if not seconds:
        return "0 min"

    total = int(seconds)
    hours = total // 3600
    minutes = (total % 3600) // 60

    if hours == 0:
        return f"{minutes} min"
    if minutes == 0:
        return f"{hours} hr"
    return f"{hours} hr {minutes} min"


def format_number(num: float) -> str:
    """Group thousands: 1234567 -> "1,234,567"; floats keep up to 3 decimals."""
    if isinstance(num, float) and not num.is_integer():
        return f"{round(num, 3):,}"
    return f"{int(num):,}"
