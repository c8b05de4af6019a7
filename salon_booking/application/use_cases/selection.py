from __future__ import annotations

from dataclasses import replace
from datetime import date

from salon_booking.domain.entities.booking_draft import (
    ANY_STYLIST,
    FIRST_AVAILABLE,
    BookingDraft,
    SelectedService,
)
from salon_booking.domain.entities.catalog import ServiceCatalogEntry

CONTACT_FIELDS = {
    "name": "client_name",
    "email": "client_email",
    "phone": "client_phone",
    "notes": "notes",
}


def toggle_service(draft: BookingDraft, entry: ServiceCatalogEntry) -> BookingDraft:
    """Remove the service if it is already selected, otherwise append it."""
    if any(s.id == entry.id for s in draft.services):
        return replace(draft, services=tuple(s for s in draft.services if s.id != entry.id))
    selected = SelectedService(
        id=entry.id,
        name=entry.name,
        category=entry.category or "Other",
        duration_minutes=entry.duration_minutes,
        price=entry.price,
    )
    return replace(draft, services=draft.services + (selected,))


def set_location(draft: BookingDraft, location_id: str, location_name: str | None) -> BookingDraft:
    # Stylist lists are per location, so any previous pick is stale.
    return replace(
        draft,
        location_id=location_id,
        location_name=location_name,
        stylist_id=None,
        stylist_name=None,
    )


def set_stylist(draft: BookingDraft, stylist_id: str, stylist_name: str | None = None) -> BookingDraft:
    if stylist_id == ANY_STYLIST:
        return replace(draft, stylist_id=None, stylist_name=FIRST_AVAILABLE)
    return replace(draft, stylist_id=stylist_id, stylist_name=stylist_name)


def set_date(draft: BookingDraft, value: date) -> BookingDraft:
    return replace(draft, date=value, time=None)


def set_time(draft: BookingDraft, value: str) -> BookingDraft:
    return replace(draft, time=value)


def set_contact_field(draft: BookingDraft, field: str, value: str) -> BookingDraft:
    """Set one of name/email/phone/notes."""
    attr = CONTACT_FIELDS.get(field)
    if attr is None:
        raise ValueError(f"Unknown contact field: {field}")
    return replace(draft, **{attr: value})


def total_duration_minutes(draft: BookingDraft) -> int:
    return sum(s.duration_minutes for s in draft.services)


def total_price(draft: BookingDraft) -> float:
    return sum((s.price or 0) for s in draft.services)
