from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.catalog import LocationOption


class LocationDirectoryPort(ABC):
    @abstractmethod
    async def list_active_locations(self) -> list[LocationOption]:
        raise NotImplementedError
