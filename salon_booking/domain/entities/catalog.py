from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceCatalogEntry:
    id: str
    name: str
    category: str
    duration_minutes: int
    price: float | None = None


@dataclass(frozen=True)
class LocationOption:
    id: str
    name: str
    address: str | None
    external_branch_ref: str | None


@dataclass(frozen=True)
class StylistOption:
    id: str
    external_staff_ref: str
    name: str
    photo_url: str | None = None
