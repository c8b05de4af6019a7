"""
Tests for the HTTP adapters against a mocked transport.
"""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from salon_booking.application.dto.booking_request import BookingRequestDTO, ClientContactDTO
from salon_booking.application.exceptions import BookingGatewayError, DirectoryReadError
from salon_booking.infrastructure.booking.function_gateway import FunctionBookingGateway
from salon_booking.infrastructure.directory.rest_directory import RestDirectory

REQUEST = BookingRequestDTO(
    branch_id="branch-weho",
    staff_id=None,
    service_ids=["svc-haircut"],
    date="2026-10-19",
    time="10:30",
    client=ClientContactDTO(name="Jane Doe", email="jane@example.com", phone="555-0100"),
    notes="",
)


def _directory(handler) -> RestDirectory:
    return RestDirectory(
        base_url="https://data.example.test/",
        api_key="anon-key",
        transport=httpx.MockTransport(handler),
    )


def _gateway(handler) -> FunctionBookingGateway:
    return FunctionBookingGateway(
        base_url="https://data.example.test",
        api_key="anon-key",
        function_name="create-phorest-booking",
        transport=httpx.MockTransport(handler),
    )


def test_services_query_filters_active_and_orders():
    """Service reads ask for active rows ordered by category then name."""
    seen: dict[str, httpx.Request] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(
            200,
            json=[
                {"id": 7, "name": "Gloss", "category": None, "duration_minutes": 45, "price": 85},
                {"id": 8, "name": "Consultation", "category": "Consultation", "duration_minutes": 30, "price": None},
            ],
        )

    services = asyncio.run(_directory(handler).list_active_services())
    request = seen["request"]
    assert request.url.path == "/rest/v1/phorest_services"
    assert request.url.params["is_active"] == "eq.true"
    assert request.url.params["order"] == "category,name"
    assert request.headers["apikey"] == "anon-key"
    assert services[0].id == "7"
    assert services[0].category == "Other"
    assert services[1].price is None


def test_stylists_scoped_to_branch_with_name_fallbacks():
    """Stylists are filtered to the branch and fall back to full name, then "Unknown"."""
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["phorest_branch_id"] == "eq.branch-weho"
        assert request.url.params["show_on_calendar"] == "eq.true"
        assert "employee_profiles!phorest_staff_mapping_user_id_fkey(" in request.url.params["select"]
        return httpx.Response(
            200,
            json=[
                {"user_id": "u1", "phorest_staff_id": "s1", "employee_profiles": {"display_name": "Sam", "full_name": "Samantha Reyes"}},
                {"user_id": "u2", "phorest_staff_id": "s2", "employee_profiles": {"display_name": None, "full_name": "Jordan Lee"}},
                {"user_id": "u3", "phorest_staff_id": "s3", "employee_profiles": None},
            ],
        )

    stylists = asyncio.run(_directory(handler).list_stylists("branch-weho"))
    assert [s.name for s in stylists] == ["Sam", "Jordan Lee", "Unknown"]
    assert stylists[0].external_staff_ref == "s1"


def test_locations_map_branch_ref():
    """A location carries its scheduler branch id."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json=[{"id": "loc-1", "name": "West Hollywood", "address": "8715 Santa Monica Blvd", "phorest_branch_id": "b-1"}],
        )

    locations = asyncio.run(_directory(handler).list_active_locations())
    assert locations[0].external_branch_ref == "b-1"


def test_directory_errors_become_read_errors():
    """HTTP failures surface as DirectoryReadError."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    with pytest.raises(DirectoryReadError):
        asyncio.run(_directory(handler).list_active_locations())


def test_directory_requires_api_key():
    """The REST directory refuses to start without a key."""
    with pytest.raises(ValueError):
        RestDirectory(base_url="https://data.example.test", api_key="")


def test_gateway_posts_payload_with_idempotency_key():
    """The booking POST carries the payload, auth and Idempotency-Key header."""
    seen: dict[str, httpx.Request] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(200, json={"success": True, "appointment_id": 981, "message": "Booking created successfully"})

    response = asyncio.run(_gateway(handler).create_booking(REQUEST, idempotency_key="key-1"))
    request = seen["request"]
    assert request.url.path == "/functions/v1/create-phorest-booking"
    assert request.headers["Idempotency-Key"] == "key-1"
    body = json.loads(request.content)
    assert body["branch_id"] == "branch-weho"
    assert body["staff_id"] is None
    assert body["client"] == {"name": "Jane Doe", "email": "jane@example.com", "phone": "555-0100"}
    assert response.appointment_id == "981"


def test_gateway_maps_scheduler_error_codes():
    """Known scheduler error codes become readable messages."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"success": False, "errorCode": "STAFF_DOUBLE_BOOKED"})

    with pytest.raises(BookingGatewayError) as exc_info:
        asyncio.run(_gateway(handler).create_booking(REQUEST))
    assert exc_info.value.code == "STAFF_DOUBLE_BOOKED"
    assert "already booked" in str(exc_info.value)


def test_gateway_reports_unsuccessful_body():
    """A 200 with success=false is still a failure."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"success": False, "error": "Missing required fields"})

    with pytest.raises(BookingGatewayError, match="Missing required fields"):
        asyncio.run(_gateway(handler).create_booking(REQUEST))


def test_gateway_wraps_transport_errors():
    """Network errors become BookingGatewayError."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(BookingGatewayError, match="unreachable"):
        asyncio.run(_gateway(handler).create_booking(REQUEST))
