from __future__ import annotations

from enum import Enum


class BookingStep(str, Enum):
    service = "service"
    location = "location"
    stylist = "stylist"
    datetime = "datetime"
    details = "details"
    confirm = "confirm"
    booked = "booked"  # terminal, outside the wizard sequence


STEP_ORDER: tuple[BookingStep, ...] = (
    BookingStep.service,
    BookingStep.location,
    BookingStep.stylist,
    BookingStep.datetime,
    BookingStep.details,
    BookingStep.confirm,
)
