from __future__ import annotations

import logging
from typing import Any

import httpx

from salon_booking.application.exceptions import DirectoryReadError
from salon_booking.application.ports.locations import LocationDirectoryPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.ports.stylists import StylistDirectoryPort
from salon_booking.core.config import settings
from salon_booking.domain.entities.catalog import LocationOption, ServiceCatalogEntry, StylistOption


class RestDirectory(ServiceCatalogPort, LocationDirectoryPort, StylistDirectoryPort):
    """Reads booking options from the salon's hosted data API (PostgREST query syntax)."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or settings.DATA_API_BASE_URL).rstrip("/")
        self._api_key = api_key or settings.DATA_API_KEY
        self._timeout = timeout if timeout is not None else settings.DATA_API_TIMEOUT_SECONDS
        self._transport = transport
        self._logger = logging.getLogger(__name__)

        if not self._api_key:
            raise ValueError("DATA_API_KEY is required for the data API directory")

    async def list_active_services(self) -> list[ServiceCatalogEntry]:
        rows = await self._select(
            "phorest_services",
            {
                "select": "id,phorest_service_id,name,category,duration_minutes,price",
                "is_active": "eq.true",
                "order": "category,name",
            },
        )
        return [
            ServiceCatalogEntry(
                id=str(row["id"]),
                name=row.get("name") or "",
                category=row.get("category") or "Other",
                duration_minutes=int(row.get("duration_minutes") or 0),
                price=row.get("price"),
            )
            for row in rows
        ]

    async def list_active_locations(self) -> list[LocationOption]:
        rows = await self._select(
            "locations",
            {
                "select": "id,name,address,phorest_branch_id",
                "is_active": "eq.true",
                "order": "display_order",
            },
        )
        return [
            LocationOption(
                id=str(row["id"]),
                name=row.get("name") or "",
                address=row.get("address"),
                external_branch_ref=row.get("phorest_branch_id"),
            )
            for row in rows
        ]

    async def list_stylists(self, branch_ref: str) -> list[StylistOption]:
        rows = await self._select(
            "phorest_staff_mapping",
            {
                "select": "user_id,phorest_staff_id,employee_profiles!phorest_staff_mapping_user_id_fkey(display_name,full_name,photo_url)",
                "is_active": "eq.true",
                "show_on_calendar": "eq.true",
                "phorest_branch_id": f"eq.{branch_ref}",
            },
        )
        stylists: list[StylistOption] = []
        for row in rows:
            profile = row.get("employee_profiles") or {}
            stylists.append(
                StylistOption(
                    id=str(row["user_id"]),
                    external_staff_ref=str(row.get("phorest_staff_id") or ""),
                    name=profile.get("display_name") or profile.get("full_name") or "Unknown",
                    photo_url=profile.get("photo_url"),
                )
            )
        return stylists

    async def _select(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        url = f"{self._base_url}/rest/v1/{table}"
        headers = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, params=params, headers=headers)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            self._logger.error("Data API read failed", extra={"table": table, "error": str(e)})
            raise DirectoryReadError(f"Failed to read {table}") from e

        if not isinstance(data, list):
            raise DirectoryReadError(f"Unexpected response shape for {table}")
        return data
