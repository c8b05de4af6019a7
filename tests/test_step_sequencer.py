"""
Tests for step guards and navigation.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date

from salon_booking.application.use_cases.selection import set_stylist, toggle_service
from salon_booking.application.use_cases.step_sequencer import (
    INITIAL_STEP,
    can_proceed,
    next_step,
    previous_step,
    step_index,
)
from salon_booking.domain.entities.booking_draft import ANY_STYLIST, BookingDraft
from salon_booking.domain.entities.booking_step import STEP_ORDER, BookingStep
from salon_booking.domain.entities.catalog import ServiceCatalogEntry

CUT = ServiceCatalogEntry(id="svc-cut", name="Haircut", category="Cutting & Styling", duration_minutes=30, price=40)

COMPLETE = BookingDraft(
    location_id="loc-weho",
    location_name="West Hollywood",
    stylist_id="usr-sarah",
    stylist_name="Sarah Mitchell",
    date=date(2026, 10, 19),
    time="10:00",
    client_name="Jane Doe",
    client_email="jane@example.com",
    client_phone="555-0100",
)
COMPLETE = toggle_service(COMPLETE, CUT)


def test_initial_step_is_service():
    """A new flow starts at service."""
    assert INITIAL_STEP == BookingStep.service
    assert [s.value for s in STEP_ORDER] == ["service", "location", "stylist", "datetime", "details", "confirm"]


def test_complete_draft_walks_every_step_in_order():
    """A full draft advances through every step up to confirm."""
    step = INITIAL_STEP
    visited = [step]
    for _ in range(10):
        step = next_step(step, COMPLETE)
        if step == visited[-1]:
            break
        visited.append(step)
    assert visited == list(STEP_ORDER)


def test_empty_draft_cannot_leave_service():
    """An empty draft stays on service."""
    assert next_step(BookingStep.service, BookingDraft()) == BookingStep.service


def test_guards_fail_again_when_data_is_removed():
    """Guards look at the current draft, not past progress."""
    assert can_proceed(BookingStep.service, COMPLETE)
    assert not can_proceed(BookingStep.service, replace(COMPLETE, services=()))
    assert not can_proceed(BookingStep.location, replace(COMPLETE, location_id=None))
    assert not can_proceed(BookingStep.details, replace(COMPLETE, client_phone=""))


def test_datetime_requires_time():
    """A date alone does not pass the datetime step."""
    draft = replace(COMPLETE, time=None)
    assert not can_proceed(BookingStep.datetime, draft)
    assert next_step(BookingStep.datetime, draft) == BookingStep.datetime


def test_stylist_guard_accepts_first_available():
    """First Available satisfies the stylist step."""
    draft = set_stylist(replace(COMPLETE, stylist_id=None, stylist_name=None), ANY_STYLIST)
    assert draft.stylist_id is None
    assert can_proceed(BookingStep.stylist, draft)


def test_stylist_guard_rejects_no_choice():
    """No stylist choice blocks the stylist step."""
    draft = replace(COMPLETE, stylist_id=None, stylist_name=None)
    assert not can_proceed(BookingStep.stylist, draft)


def test_details_require_all_contact_fields():
    """Name, email and phone are all required."""
    for field in ("client_name", "client_email", "client_phone"):
        assert not can_proceed(BookingStep.details, replace(COMPLETE, **{field: ""}))
    assert can_proceed(BookingStep.details, replace(COMPLETE, notes=""))


def test_confirm_never_advances():
    """Next from confirm stays on confirm."""
    assert can_proceed(BookingStep.confirm, BookingDraft())
    assert next_step(BookingStep.confirm, COMPLETE) == BookingStep.confirm


def test_back_moves_one_step_unconditionally():
    """Back ignores guards and stops at service."""
    assert previous_step(BookingStep.confirm) == BookingStep.details
    assert previous_step(BookingStep.location) == BookingStep.service
    assert previous_step(BookingStep.service) == BookingStep.service


def test_booked_is_terminal():
    """Nothing leaves booked."""
    assert previous_step(BookingStep.booked) == BookingStep.booked
    assert next_step(BookingStep.booked, COMPLETE) == BookingStep.booked
    assert step_index(BookingStep.booked) == len(STEP_ORDER)
