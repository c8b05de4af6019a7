from __future__ import annotations

from dataclasses import dataclass
from datetime import date

ANY_STYLIST = "any"
FIRST_AVAILABLE = "First Available"


@dataclass(frozen=True)
class SelectedService:
    id: str
    name: str
    category: str
    duration_minutes: int
    price: float | None = None


@dataclass(frozen=True)
class BookingDraft:
    services: tuple[SelectedService, ...] = ()
    location_id: str | None = None
    location_name: str | None = None
    stylist_id: str | None = None
    stylist_name: str | None = None  # "First Available" when no preference
    date: date | None = None
    time: str | None = None  # HH:MM, only meaningful with the date active when chosen
    client_name: str = ""
    client_email: str = ""
    client_phone: str = ""
    notes: str = ""
