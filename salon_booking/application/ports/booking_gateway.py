from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.application.dto.booking_request import BookingRequestDTO, BookingResponseDTO


class BookingGatewayPort(ABC):
    @abstractmethod
    async def create_booking(
        self,
        request: BookingRequestDTO,
        idempotency_key: str | None = None,
    ) -> BookingResponseDTO:
        """
        Submit one booking to the external scheduler.
        Raises BookingGatewayError on rejection or transport failure.
        """
        raise NotImplementedError
