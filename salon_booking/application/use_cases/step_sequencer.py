from __future__ import annotations

from salon_booking.domain.entities.booking_draft import FIRST_AVAILABLE, BookingDraft
from salon_booking.domain.entities.booking_step import STEP_ORDER, BookingStep

INITIAL_STEP = BookingStep.service


def can_proceed(step: BookingStep, draft: BookingDraft) -> bool:
    """Guard that must hold to move forward from `step`. Re-evaluated on every call."""
    if step == BookingStep.service:
        return len(draft.services) > 0
    if step == BookingStep.location:
        return draft.location_id is not None
    if step == BookingStep.stylist:
        return draft.stylist_id is not None or draft.stylist_name == FIRST_AVAILABLE
    if step == BookingStep.datetime:
        return draft.date is not None and draft.time is not None
    if step == BookingStep.details:
        return bool(draft.client_name and draft.client_email and draft.client_phone)
    if step == BookingStep.confirm:
        return True
    return False


def step_index(step: BookingStep) -> int:
    """Zero-based position in the wizard; `booked` sits past the last step."""
    if step == BookingStep.booked:
        return len(STEP_ORDER)
    return STEP_ORDER.index(step)


def next_step(step: BookingStep, draft: BookingDraft) -> BookingStep:
    # confirm launches submission, it never advances
    if step in (BookingStep.confirm, BookingStep.booked):
        return step
    if not can_proceed(step, draft):
        return step
    return STEP_ORDER[step_index(step) + 1]


def previous_step(step: BookingStep) -> BookingStep:
    if step == BookingStep.booked:
        return step
    index = step_index(step)
    if index == 0:
        return step
    return STEP_ORDER[index - 1]
