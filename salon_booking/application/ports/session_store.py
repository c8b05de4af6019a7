from abc import ABC, abstractmethod

from salon_booking.application.use_cases.booking_flow import BookingFlow


class BookingSessionStorePort(ABC):
    @abstractmethod
    def get(self, session_id: str) -> BookingFlow | None:
        raise NotImplementedError

    @abstractmethod
    def put(self, flow: BookingFlow) -> None:
        raise NotImplementedError

    @abstractmethod
    def discard(self, session_id: str) -> None:
        raise NotImplementedError
