from __future__ import annotations

from datetime import date, timedelta

from salon_booking.domain.entities.catalog import ServiceCatalogEntry

# Global business hours; not scoped per location.
OPENING_HOUR = 9
CLOSING_HOUR = 19
SLOT_MINUTES = 30
DEFAULT_HORIZON_DAYS = 14
SUNDAY = 6


def generate_time_slots() -> list[str]:
    """Every HH:MM on the half hour from opening up to, not including, closing."""
    slots: list[str] = []
    minutes = OPENING_HOUR * 60
    while minutes < CLOSING_HOUR * 60:
        slots.append(f"{minutes // 60:02d}:{minutes % 60:02d}")
        minutes += SLOT_MINUTES
    return slots


def generate_available_dates(reference_date: date, horizon_days: int = DEFAULT_HORIZON_DAYS) -> list[date]:
    """
    Bookable dates after reference_date.
    Scans horizon_days calendar days starting tomorrow and drops Sundays,
    so the result usually holds fewer than horizon_days entries.
    """
    dates: list[date] = []
    for offset in range(1, horizon_days + 1):
        candidate = reference_date + timedelta(days=offset)
        if candidate.weekday() != SUNDAY:
            dates.append(candidate)
    return dates


def group_services_by_category(entries: list[ServiceCatalogEntry]) -> dict[str, list[ServiceCatalogEntry]]:
    grouped: dict[str, list[ServiceCatalogEntry]] = {}
    for entry in entries:
        grouped.setdefault(entry.category or "Other", []).append(entry)
    return grouped
