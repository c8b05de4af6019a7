"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import date

import pytest

from salon_booking.application.use_cases.booking_flow import BookingFlow
from salon_booking.domain.entities.booking_step import BookingStep
from salon_booking.infrastructure.booking.mock_gateway import MockBookingGateway
from salon_booking.infrastructure.directory.static_directory import StaticDirectory

TODAY = date(2026, 10, 17)  # a Saturday


@pytest.fixture
def directory() -> StaticDirectory:
    return StaticDirectory()


@pytest.fixture
def gateway() -> MockBookingGateway:
    return MockBookingGateway()


@pytest.fixture
def make_flow(directory):
    def _make(gateway=None, stylists=None, catalog=None, session_id="test-session") -> BookingFlow:
        return BookingFlow(
            catalog=catalog or directory,
            locations=directory,
            stylists=stylists or directory,
            gateway=gateway or MockBookingGateway(),
            today=lambda: TODAY,
            session_id=session_id,
        )

    return _make


async def _walk_to_confirm(flow: BookingFlow) -> BookingFlow:
    """Fill a complete draft and advance to the confirm step."""
    await flow.load_services()
    await flow.load_locations()
    flow.toggle_service("svc-haircut")
    flow.toggle_service("svc-gloss")
    flow.next()
    await flow.select_location("loc-weho")
    flow.next()
    flow.select_stylist("usr-sarah")
    flow.next()
    flow.select_date(date(2026, 10, 19))
    flow.select_time("10:30")
    flow.next()
    flow.update_details(name="Jane Doe", email="jane@example.com", phone="(555) 123-4567", notes="Curly hair")
    flow.next()
    assert flow.step == BookingStep.confirm
    return flow


@pytest.fixture
def walk_to_confirm():
    return _walk_to_confirm
