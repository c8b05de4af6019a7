from __future__ import annotations

from datetime import date


def format_time_12h(time_24h: str) -> str:
    """'14:30' -> '2:30 PM'."""
    hours, minutes = time_24h.split(":")
    hour = int(hours)
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minutes} {suffix}"


def format_long_date(value: date) -> str:
    return f"{value.strftime('%A, %B')} {value.day}, {value.year}"


def format_price(amount: float) -> str:
    if float(amount).is_integer():
        return f"${int(amount):,}"
    return f"${amount:,.2f}"
