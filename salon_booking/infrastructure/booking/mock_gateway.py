from __future__ import annotations

import logging

from salon_booking.application.dto.booking_request import BookingRequestDTO, BookingResponseDTO
from salon_booking.application.ports.booking_gateway import BookingGatewayPort


class MockBookingGateway(BookingGatewayPort):
    def __init__(self) -> None:
        self._bookings: dict[str, BookingRequestDTO] = {}
        self._by_idempotency_key: dict[str, str] = {}
        self._logger = logging.getLogger(__name__)

    @property
    def bookings(self) -> dict[str, BookingRequestDTO]:
        return dict(self._bookings)

    async def create_booking(
        self,
        request: BookingRequestDTO,
        idempotency_key: str | None = None,
    ) -> BookingResponseDTO:
        if idempotency_key and idempotency_key in self._by_idempotency_key:
            existing = self._by_idempotency_key[idempotency_key]
            return BookingResponseDTO(success=True, appointment_id=existing, message="Booking already created")

        appointment_id = f"mock_appointment_{len(self._bookings) + 1}"
        self._bookings[appointment_id] = request
        if idempotency_key:
            self._by_idempotency_key[idempotency_key] = appointment_id
        self._logger.info(
            "Mock booking created",
            extra={
                "appointment_id": appointment_id,
                "branch_id": request.branch_id,
                "date": request.date,
                "time": request.time,
            },
        )
        return BookingResponseDTO(success=True, appointment_id=appointment_id, message="Booking created successfully")
