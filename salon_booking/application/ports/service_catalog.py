from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.catalog import ServiceCatalogEntry


class ServiceCatalogPort(ABC):
    @abstractmethod
    async def list_active_services(self) -> list[ServiceCatalogEntry]:
        """Active services ordered by category, then name."""
        raise NotImplementedError
