from __future__ import annotations

from salon_booking.application.ports.locations import LocationDirectoryPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.ports.stylists import StylistDirectoryPort
from salon_booking.domain.entities.catalog import LocationOption, ServiceCatalogEntry, StylistOption
from salon_booking.infrastructure.directory.static_data import (
    LOCATIONS,
    SERVICE_CATALOG,
    STYLISTS_BY_BRANCH,
)


class StaticDirectory(ServiceCatalogPort, LocationDirectoryPort, StylistDirectoryPort):
    def __init__(
        self,
        services: list[ServiceCatalogEntry] | None = None,
        locations: list[LocationOption] | None = None,
        stylists_by_branch: dict[str, list[StylistOption]] | None = None,
    ) -> None:
        self._services = services if services is not None else SERVICE_CATALOG
        self._locations = locations if locations is not None else LOCATIONS
        self._stylists_by_branch = stylists_by_branch if stylists_by_branch is not None else STYLISTS_BY_BRANCH

    async def list_active_services(self) -> list[ServiceCatalogEntry]:
        return sorted(self._services, key=lambda s: (s.category or "Other", s.name))

    async def list_active_locations(self) -> list[LocationOption]:
        return list(self._locations)

    async def list_stylists(self, branch_ref: str) -> list[StylistOption]:
        return list(self._stylists_by_branch.get(branch_ref, []))
