from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ConfirmedBooking:
    """What the confirmation screen shows. Not re-read from the scheduler."""

    date: date
    time: str
    location_name: str | None
    service_names: tuple[str, ...]
    client_email: str
