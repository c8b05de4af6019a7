from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from salon_booking.application.dto.booking_request import BookingRequestDTO
from salon_booking.application.ports.booking_gateway import BookingGatewayPort
from salon_booking.domain.entities.booking_draft import BookingDraft
from salon_booking.domain.entities.catalog import LocationOption, StylistOption
from salon_booking.domain.entities.confirmed_booking import ConfirmedBooking

BOOKED_NOTIFICATION = "Appointment booked successfully!"
FAILED_NOTIFICATION = "Failed to book appointment. Please try again or call us directly."
IN_FLIGHT_NOTIFICATION = "Your booking is already being submitted."


@dataclass(frozen=True)
class SubmissionResult:
    action: str  # "booked", "failed", "in_flight"
    notification: str
    confirmation: ConfirmedBooking | None = None
    error: str | None = None


class BookingSubmitter:
    """
    Sends a completed draft to the scheduler, once per user-initiated submit.

    The draft is trusted: the step guards are what keep incomplete drafts
    from reaching here. `submitting` is set before the first await and
    cleared in `finally`, so on a single event loop a second trigger while a
    call is outstanding is turned away without reaching the gateway.
    """

    def __init__(self, gateway: BookingGatewayPort) -> None:
        self._gateway = gateway
        self._submitting = False
        self._last_request: BookingRequestDTO | None = None
        self._idempotency_key: str | None = None
        self._logger = logging.getLogger(__name__)

    @property
    def submitting(self) -> bool:
        return self._submitting

    async def submit(
        self,
        draft: BookingDraft,
        location: LocationOption | None,
        stylist: StylistOption | None,
    ) -> SubmissionResult:
        if self._submitting:
            self._logger.info("Submission already in flight, ignoring trigger")
            return SubmissionResult(action="in_flight", notification=IN_FLIGHT_NOTIFICATION)

        self._submitting = True
        try:
            request = BookingRequestDTO.from_draft(
                draft,
                branch_ref=location.external_branch_ref if location else None,
                staff_ref=stylist.external_staff_ref if stylist and draft.stylist_id else None,
            )
            key = self._key_for(request)
            response = await self._gateway.create_booking(request, idempotency_key=key)

            self._last_request = None
            self._idempotency_key = None
            self._logger.info(
                "Booking submitted",
                extra={
                    "location_id": draft.location_id,
                    "service_count": len(draft.services),
                    "appointment_id": response.appointment_id,
                },
            )
            return SubmissionResult(
                action="booked",
                notification=BOOKED_NOTIFICATION,
                confirmation=ConfirmedBooking(
                    date=draft.date,
                    time=draft.time or "",
                    location_name=draft.location_name,
                    service_names=tuple(s.name for s in draft.services),
                    client_email=draft.client_email,
                ),
            )
        except Exception as e:
            self._logger.error("Booking submission failed", extra={"error": str(e)})
            return SubmissionResult(action="failed", notification=FAILED_NOTIFICATION, error=str(e))
        finally:
            self._submitting = False

    def _key_for(self, request: BookingRequestDTO) -> str:
        # Retrying the same payload reuses the key; any change starts a new one.
        if self._idempotency_key is None or request != self._last_request:
            self._idempotency_key = uuid.uuid4().hex
            self._last_request = request
        return self._idempotency_key
