from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from salon_booking.application.exceptions import FlowStateError
from salon_booking.application.ports.booking_gateway import BookingGatewayPort
from salon_booking.application.ports.locations import LocationDirectoryPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.ports.stylists import StylistDirectoryPort
from salon_booking.application.use_cases import selection
from salon_booking.application.use_cases.step_sequencer import (
    INITIAL_STEP,
    can_proceed,
    next_step,
    previous_step,
)
from salon_booking.application.use_cases.submission import BookingSubmitter, SubmissionResult
from salon_booking.application.utils.availability import (
    DEFAULT_HORIZON_DAYS,
    generate_available_dates,
    generate_time_slots,
    group_services_by_category,
)
from salon_booking.domain.entities.booking_draft import ANY_STYLIST, BookingDraft
from salon_booking.domain.entities.booking_step import BookingStep
from salon_booking.domain.entities.catalog import LocationOption, ServiceCatalogEntry, StylistOption
from salon_booking.domain.entities.confirmed_booking import ConfirmedBooking


@dataclass(frozen=True)
class StylistListing:
    """Stylists fetched for one location; only valid while that location is selected."""

    location_id: str | None = None
    stylists: tuple[StylistOption, ...] = ()


class BookingFlow:
    """One visitor's pass through the booking wizard."""

    def __init__(
        self,
        catalog: ServiceCatalogPort,
        locations: LocationDirectoryPort,
        stylists: StylistDirectoryPort,
        gateway: BookingGatewayPort,
        today: Callable[[], date],
        horizon_days: int = DEFAULT_HORIZON_DAYS,
        session_id: str | None = None,
    ) -> None:
        self.session_id = session_id or uuid.uuid4().hex
        self.step: BookingStep = INITIAL_STEP
        self.draft = BookingDraft()
        self.confirmation: ConfirmedBooking | None = None
        self._catalog = catalog
        self._location_directory = locations
        self._stylist_directory = stylists
        self._submitter = BookingSubmitter(gateway)
        self._today = today
        self._horizon_days = horizon_days
        self._services: list[ServiceCatalogEntry] = []
        self._locations: list[LocationOption] = []
        self._stylist_listing = StylistListing()
        self._logger = logging.getLogger(__name__)

    # Option lists

    @property
    def services(self) -> list[ServiceCatalogEntry]:
        return list(self._services)

    @property
    def services_by_category(self) -> dict[str, list[ServiceCatalogEntry]]:
        return group_services_by_category(self._services)

    @property
    def locations(self) -> list[LocationOption]:
        return list(self._locations)

    @property
    def stylists(self) -> list[StylistOption]:
        if self._stylist_listing.location_id != self.draft.location_id:
            return []
        return list(self._stylist_listing.stylists)

    @property
    def submitting(self) -> bool:
        return self._submitter.submitting

    @property
    def can_proceed(self) -> bool:
        return can_proceed(self.step, self.draft)

    def available_dates(self) -> list[date]:
        return generate_available_dates(self._today(), self._horizon_days)

    def time_slots(self) -> list[str]:
        return generate_time_slots()

    async def load_services(self) -> list[ServiceCatalogEntry]:
        try:
            self._services = await self._catalog.list_active_services()
        except Exception as e:
            self._logger.warning(
                "Service catalog unavailable",
                extra={"session_id": self.session_id, "error": str(e)},
            )
            self._services = []
        return self.services

    async def load_locations(self) -> list[LocationOption]:
        try:
            self._locations = await self._location_directory.list_active_locations()
        except Exception as e:
            self._logger.warning(
                "Location list unavailable",
                extra={"session_id": self.session_id, "error": str(e)},
            )
            self._locations = []
        return self.locations

    async def _refresh_stylists(self, location: LocationOption) -> None:
        requested_for = location.id
        stylists: list[StylistOption] = []
        if location.external_branch_ref:
            try:
                stylists = await self._stylist_directory.list_stylists(location.external_branch_ref)
            except Exception as e:
                self._logger.warning(
                    "Stylist list unavailable",
                    extra={"session_id": self.session_id, "location_id": requested_for, "error": str(e)},
                )

        if self.draft.location_id != requested_for:
            self._logger.info(
                "Discarding stylist list for superseded location",
                extra={"session_id": self.session_id, "location_id": requested_for},
            )
            return
        self._stylist_listing = StylistListing(location_id=requested_for, stylists=tuple(stylists))

    # Selections

    def toggle_service(self, service_id: str) -> BookingDraft:
        self._ensure_open()
        entry = next((s for s in self._services if s.id == service_id), None)
        if entry is None:
            raise LookupError(f"Unknown service: {service_id}")
        self.draft = selection.toggle_service(self.draft, entry)
        return self.draft

    async def select_location(self, location_id: str) -> BookingDraft:
        self._ensure_open()
        location = self._find_location(location_id)
        if location is None:
            raise LookupError(f"Unknown location: {location_id}")
        self.draft = selection.set_location(self.draft, location.id, location.name)
        await self._refresh_stylists(location)
        return self.draft

    def select_stylist(self, stylist_id: str) -> BookingDraft:
        self._ensure_open()
        if stylist_id == ANY_STYLIST:
            self.draft = selection.set_stylist(self.draft, ANY_STYLIST)
            return self.draft
        stylist = next((s for s in self.stylists if s.id == stylist_id), None)
        if stylist is None:
            raise LookupError(f"Unknown stylist: {stylist_id}")
        self.draft = selection.set_stylist(self.draft, stylist.id, stylist.name)
        return self.draft

    def select_date(self, value: date) -> BookingDraft:
        self._ensure_open()
        if value not in self.available_dates():
            raise ValueError(f"{value.isoformat()} is not an available date")
        self.draft = selection.set_date(self.draft, value)
        return self.draft

    def select_time(self, value: str) -> BookingDraft:
        self._ensure_open()
        if value not in self.time_slots():
            raise ValueError(f"{value} is not an available time slot")
        self.draft = selection.set_time(self.draft, value)
        return self.draft

    def update_details(self, **fields: str | None) -> BookingDraft:
        self._ensure_open()
        draft = self.draft
        for field, value in fields.items():
            if value is not None:
                draft = selection.set_contact_field(draft, field, value)
        self.draft = draft
        return self.draft

    # Navigation

    def next(self) -> BookingStep:
        if self.step == BookingStep.booked:
            return self.step
        if not can_proceed(self.step, self.draft):
            self._logger.info(
                "Step guard not satisfied",
                extra={"session_id": self.session_id, "step": self.step.value},
            )
        self.step = next_step(self.step, self.draft)
        return self.step

    def back(self) -> BookingStep:
        self.step = previous_step(self.step)
        return self.step

    async def submit(self) -> SubmissionResult:
        if self.step != BookingStep.confirm:
            raise FlowStateError(f"Cannot submit from step '{self.step.value}'")

        # Resolved from lists already on hand, never re-fetched at submit time.
        location = self._find_location(self.draft.location_id)
        stylist = next((s for s in self.stylists if s.id == self.draft.stylist_id), None)

        result = await self._submitter.submit(self.draft, location, stylist)
        if result.action == "booked":
            self.step = BookingStep.booked
            self.confirmation = result.confirmation
            self.draft = BookingDraft()
        return result

    def _find_location(self, location_id: str | None) -> LocationOption | None:
        if location_id is None:
            return None
        return next((loc for loc in self._locations if loc.id == location_id), None)

    def _ensure_open(self) -> None:
        if self.step == BookingStep.booked:
            raise FlowStateError("Booking already confirmed")
