from __future__ import annotations

import logging

import httpx

from salon_booking.application.dto.booking_request import BookingRequestDTO, BookingResponseDTO
from salon_booking.application.exceptions import BookingGatewayError
from salon_booking.application.ports.booking_gateway import BookingGatewayPort
from salon_booking.core.config import settings

SCHEDULER_ERROR_MESSAGES = {
    "STAFF_DOUBLE_BOOKED": "This time slot is already booked for the selected stylist.",
    "STAFF_UNQUALIFIED": "The selected stylist is not qualified to perform this service.",
    "CLIENT_ALREADY_BOOKED": "This client already has an appointment at this time.",
    "BRANCH_CLOSED": "The salon is closed at the requested time.",
}


class FunctionBookingGateway(BookingGatewayPort):
    """Posts bookings to the platform function that writes through to the scheduler."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        function_name: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or settings.BOOKING_API_BASE_URL).rstrip("/")
        self._api_key = api_key or settings.BOOKING_API_KEY
        self._function_name = function_name or settings.BOOKING_FUNCTION_NAME
        self._transport = transport
        self._logger = logging.getLogger(__name__)

        if not self._api_key:
            raise ValueError("BOOKING_API_KEY is required for the booking gateway")

    async def create_booking(
        self,
        request: BookingRequestDTO,
        idempotency_key: str | None = None,
    ) -> BookingResponseDTO:
        url = f"{self._base_url}/functions/v1/{self._function_name}"
        headers = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        if idempotency_key:
            headers["Idempotency-Key"] = idempotency_key

        # No local timeout: the call resolves or fails on the scheduler's terms.
        try:
            async with httpx.AsyncClient(timeout=None, transport=self._transport) as client:
                response = await client.post(url, json=request.model_dump(mode="json"), headers=headers)
        except httpx.HTTPError as e:
            self._logger.error("Booking request failed", extra={"error": str(e)})
            raise BookingGatewayError(f"Booking service unreachable: {e}") from e

        try:
            body = response.json() if response.content else {}
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.status_code >= 400 or body.get("success") is False:
            code = body.get("errorCode") or body.get("code")
            message = SCHEDULER_ERROR_MESSAGES.get(code) or body.get("error") or body.get("message")
            if not message:
                message = f"Booking service error: {response.status_code}"
            self._logger.error(
                "Booking rejected",
                extra={"status": response.status_code, "error_code": code, "error": message},
            )
            raise BookingGatewayError(message, code=code)

        appointment_id = body.get("appointment_id") or body.get("appointmentId") or body.get("id")
        result = BookingResponseDTO(
            success=True,
            appointment_id=str(appointment_id) if appointment_id is not None else None,
            message=body.get("message"),
        )
        self._logger.info("Booking created", extra={"appointment_id": result.appointment_id})
        return result
