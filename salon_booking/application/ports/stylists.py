from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.catalog import StylistOption


class StylistDirectoryPort(ABC):
    @abstractmethod
    async def list_stylists(self, branch_ref: str) -> list[StylistOption]:
        """Active, calendar-visible staff for the given external branch."""
        raise NotImplementedError
