from datetime import date, datetime
from functools import lru_cache
import logging
from zoneinfo import ZoneInfo

from salon_booking.core.config import settings
from salon_booking.application.ports.booking_gateway import BookingGatewayPort
from salon_booking.application.ports.locations import LocationDirectoryPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.ports.stylists import StylistDirectoryPort
from salon_booking.application.use_cases.booking_flow import BookingFlow
from salon_booking.infrastructure.booking.function_gateway import FunctionBookingGateway
from salon_booking.infrastructure.booking.mock_gateway import MockBookingGateway
from salon_booking.infrastructure.directory.rest_directory import RestDirectory
from salon_booking.infrastructure.directory.static_directory import StaticDirectory
from salon_booking.infrastructure.store.memory_store import MemoryBookingSessionStore


_session_store: MemoryBookingSessionStore | None = None


def _is_local() -> bool:
    return settings.ENV.lower() in {"dev", "local"}


def _require(value: str | None, name: str) -> None:
    if not value:
        raise ValueError(f"{name} is required outside dev/local.")


# Directory and gateway switch together: static branch/staff refs must never
# reach the live booking function.
@lru_cache
def get_directory() -> RestDirectory | StaticDirectory:
    logger = logging.getLogger(__name__)
    if _is_local():
        logger.info("Using StaticDirectory (ENV=%s)", settings.ENV)
        return StaticDirectory()
    _require(settings.DATA_API_KEY, "DATA_API_KEY")
    return RestDirectory()


def get_service_catalog() -> ServiceCatalogPort:
    return get_directory()


def get_location_directory() -> LocationDirectoryPort:
    return get_directory()


def get_stylist_directory() -> StylistDirectoryPort:
    return get_directory()


@lru_cache
def get_booking_gateway() -> BookingGatewayPort:
    logger = logging.getLogger(__name__)
    if _is_local():
        logger.info("Using MockBookingGateway (ENV=%s)", settings.ENV)
        return MockBookingGateway()
    _require(settings.BOOKING_API_KEY, "BOOKING_API_KEY")
    return FunctionBookingGateway()


def get_session_store() -> MemoryBookingSessionStore:
    global _session_store
    if _session_store is None:
        _session_store = MemoryBookingSessionStore()
    return _session_store


def business_today() -> date:
    return datetime.now(ZoneInfo(settings.BUSINESS_TIMEZONE)).date()


def new_booking_flow() -> BookingFlow:
    return BookingFlow(
        catalog=get_service_catalog(),
        locations=get_location_directory(),
        stylists=get_stylist_directory(),
        gateway=get_booking_gateway(),
        today=business_today,
        horizon_days=settings.BOOKING_HORIZON_DAYS,
    )
