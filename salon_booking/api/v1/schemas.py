from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from salon_booking.application.use_cases.booking_flow import BookingFlow
from salon_booking.application.use_cases.selection import total_duration_minutes, total_price
from salon_booking.application.use_cases.step_sequencer import step_index
from salon_booking.application.utils.formatting import format_long_date, format_time_12h
from salon_booking.domain.entities.booking_step import BookingStep
from salon_booking.domain.entities.catalog import LocationOption, ServiceCatalogEntry, StylistOption
from salon_booking.domain.entities.confirmed_booking import ConfirmedBooking


class ServiceSchema(BaseModel):
    id: str
    name: str
    category: str
    duration_minutes: int
    price: float | None = None

    @classmethod
    def from_entry(cls, entry: ServiceCatalogEntry) -> "ServiceSchema":
        return cls(
            id=entry.id,
            name=entry.name,
            category=entry.category,
            duration_minutes=entry.duration_minutes,
            price=entry.price,
        )


class ServiceCategorySchema(BaseModel):
    category: str
    services: list[ServiceSchema]


class CatalogResponseSchema(BaseModel):
    categories: list[ServiceCategorySchema]


class LocationSchema(BaseModel):
    id: str
    name: str
    address: str | None = None

    @classmethod
    def from_option(cls, option: LocationOption) -> "LocationSchema":
        return cls(id=option.id, name=option.name, address=option.address)


class StylistSchema(BaseModel):
    id: str
    name: str
    photo_url: str | None = None

    @classmethod
    def from_option(cls, option: StylistOption) -> "StylistSchema":
        return cls(id=option.id, name=option.name, photo_url=option.photo_url)


class TimeSlotSchema(BaseModel):
    value: str
    label: str


class AvailabilityResponseSchema(BaseModel):
    dates: list[dt.date]
    time_slots: list[TimeSlotSchema]


class LocationSelectSchema(BaseModel):
    location_id: str


class StylistSelectSchema(BaseModel):
    stylist_id: str  # a stylist id, or "any" for first available


class DateSelectSchema(BaseModel):
    date: dt.date


class TimeSelectSchema(BaseModel):
    time: str = Field(pattern=r"^\d{2}:\d{2}$")


class DetailsUpdateSchema(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    notes: str | None = None


class DraftSchema(BaseModel):
    services: list[ServiceSchema] = Field(default_factory=list)
    location_id: str | None = None
    location_name: str | None = None
    stylist_id: str | None = None
    stylist_name: str | None = None
    date: dt.date | None = None
    time: str | None = None
    client_name: str = ""
    client_email: str = ""
    client_phone: str = ""
    notes: str = ""


class ConfirmationSchema(BaseModel):
    date: dt.date
    date_display: str
    time: str
    time_display: str
    location_name: str | None = None
    service_names: list[str]
    client_email: str
    message: str

    @classmethod
    def from_confirmed(cls, confirmed: ConfirmedBooking) -> "ConfirmationSchema":
        return cls(
            date=confirmed.date,
            date_display=format_long_date(confirmed.date),
            time=confirmed.time,
            time_display=format_time_12h(confirmed.time),
            location_name=confirmed.location_name,
            service_names=list(confirmed.service_names),
            client_email=confirmed.client_email,
            message=f"We've sent a confirmation email to {confirmed.client_email}",
        )


class SessionResponseSchema(BaseModel):
    session_id: str
    step: BookingStep
    step_number: int
    can_proceed: bool
    submitting: bool
    draft: DraftSchema
    total_duration_minutes: int
    total_price: float
    confirmation: ConfirmationSchema | None = None

    @classmethod
    def from_flow(cls, flow: BookingFlow) -> "SessionResponseSchema":
        draft = flow.draft
        return cls(
            session_id=flow.session_id,
            step=flow.step,
            step_number=step_index(flow.step) + 1,
            can_proceed=flow.can_proceed,
            submitting=flow.submitting,
            draft=DraftSchema(
                services=[
                    ServiceSchema(
                        id=s.id,
                        name=s.name,
                        category=s.category,
                        duration_minutes=s.duration_minutes,
                        price=s.price,
                    )
                    for s in draft.services
                ],
                location_id=draft.location_id,
                location_name=draft.location_name,
                stylist_id=draft.stylist_id,
                stylist_name=draft.stylist_name,
                date=draft.date,
                time=draft.time,
                client_name=draft.client_name,
                client_email=draft.client_email,
                client_phone=draft.client_phone,
                notes=draft.notes,
            ),
            total_duration_minutes=total_duration_minutes(draft),
            total_price=total_price(draft),
            confirmation=(
                ConfirmationSchema.from_confirmed(flow.confirmation) if flow.confirmation else None
            ),
        )


class SubmitResponseSchema(BaseModel):
    notification: str
    session: SessionResponseSchema
