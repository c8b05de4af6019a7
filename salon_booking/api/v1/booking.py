from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from salon_booking.api.v1.schemas import (
    AvailabilityResponseSchema,
    CatalogResponseSchema,
    DateSelectSchema,
    DetailsUpdateSchema,
    LocationSchema,
    LocationSelectSchema,
    ServiceCategorySchema,
    ServiceSchema,
    SessionResponseSchema,
    StylistSchema,
    StylistSelectSchema,
    SubmitResponseSchema,
    TimeSelectSchema,
    TimeSlotSchema,
)
from salon_booking.application.exceptions import FlowStateError
from salon_booking.application.use_cases.booking_flow import BookingFlow
from salon_booking.application.utils.formatting import format_time_12h
from salon_booking.infrastructure.store.memory_store import MemoryBookingSessionStore
from salon_booking.wiring.dependencies import get_session_store, new_booking_flow

router = APIRouter(prefix="/booking")
logger = logging.getLogger(__name__)


async def get_flow(
    session_id: str,
    store: MemoryBookingSessionStore = Depends(get_session_store),
) -> BookingFlow:
    flow = store.get(session_id)
    if flow is None:
        raise HTTPException(status_code=404, detail="Booking session not found")
    return flow


@router.post("/sessions", response_model=SessionResponseSchema, status_code=201)
async def create_session(store: MemoryBookingSessionStore = Depends(get_session_store)):
    try:
        flow = new_booking_flow()
    except ValueError as e:
        logger.error("Booking flow unavailable", extra={"error": str(e)})
        raise HTTPException(status_code=503, detail="Online booking is unavailable")

    await flow.load_services()
    await flow.load_locations()
    store.put(flow)
    logger.info("Booking session started", extra={"session_id": flow.session_id})
    return SessionResponseSchema.from_flow(flow)


@router.get("/sessions/{session_id}", response_model=SessionResponseSchema)
async def get_session(flow: BookingFlow = Depends(get_flow)):
    return SessionResponseSchema.from_flow(flow)


@router.delete("/sessions/{session_id}", status_code=204)
async def abandon_session(
    session_id: str,
    store: MemoryBookingSessionStore = Depends(get_session_store),
) -> None:
    store.discard(session_id)


@router.get("/sessions/{session_id}/services", response_model=CatalogResponseSchema)
async def list_services(flow: BookingFlow = Depends(get_flow)):
    return CatalogResponseSchema(
        categories=[
            ServiceCategorySchema(
                category=category,
                services=[ServiceSchema.from_entry(e) for e in entries],
            )
            for category, entries in flow.services_by_category.items()
        ]
    )


@router.get("/sessions/{session_id}/locations", response_model=list[LocationSchema])
async def list_locations(flow: BookingFlow = Depends(get_flow)):
    return [LocationSchema.from_option(loc) for loc in flow.locations]


@router.get("/sessions/{session_id}/stylists", response_model=list[StylistSchema])
async def list_stylists(flow: BookingFlow = Depends(get_flow)):
    return [StylistSchema.from_option(s) for s in flow.stylists]


@router.get("/sessions/{session_id}/availability", response_model=AvailabilityResponseSchema)
async def get_availability(flow: BookingFlow = Depends(get_flow)):
    return AvailabilityResponseSchema(
        dates=flow.available_dates(),
        time_slots=[TimeSlotSchema(value=t, label=format_time_12h(t)) for t in flow.time_slots()],
    )


@router.post("/sessions/{session_id}/services/{service_id}/toggle", response_model=SessionResponseSchema)
async def toggle_service(service_id: str, flow: BookingFlow = Depends(get_flow)):
    _apply(lambda: flow.toggle_service(service_id))
    return SessionResponseSchema.from_flow(flow)


@router.put("/sessions/{session_id}/location", response_model=SessionResponseSchema)
async def select_location(req: LocationSelectSchema, flow: BookingFlow = Depends(get_flow)):
    try:
        await flow.select_location(req.location_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except FlowStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return SessionResponseSchema.from_flow(flow)


@router.put("/sessions/{session_id}/stylist", response_model=SessionResponseSchema)
async def select_stylist(req: StylistSelectSchema, flow: BookingFlow = Depends(get_flow)):
    _apply(lambda: flow.select_stylist(req.stylist_id))
    return SessionResponseSchema.from_flow(flow)


@router.put("/sessions/{session_id}/date", response_model=SessionResponseSchema)
async def select_date(req: DateSelectSchema, flow: BookingFlow = Depends(get_flow)):
    _apply(lambda: flow.select_date(req.date))
    return SessionResponseSchema.from_flow(flow)


@router.put("/sessions/{session_id}/time", response_model=SessionResponseSchema)
async def select_time(req: TimeSelectSchema, flow: BookingFlow = Depends(get_flow)):
    _apply(lambda: flow.select_time(req.time))
    return SessionResponseSchema.from_flow(flow)


@router.patch("/sessions/{session_id}/details", response_model=SessionResponseSchema)
async def update_details(req: DetailsUpdateSchema, flow: BookingFlow = Depends(get_flow)):
    _apply(lambda: flow.update_details(**req.model_dump()))
    return SessionResponseSchema.from_flow(flow)


@router.post("/sessions/{session_id}/next", response_model=SessionResponseSchema)
async def next_step(flow: BookingFlow = Depends(get_flow)):
    flow.next()
    return SessionResponseSchema.from_flow(flow)


@router.post("/sessions/{session_id}/back", response_model=SessionResponseSchema)
async def previous_step(flow: BookingFlow = Depends(get_flow)):
    flow.back()
    return SessionResponseSchema.from_flow(flow)


@router.post("/sessions/{session_id}/submit", response_model=SubmitResponseSchema)
async def submit_booking(flow: BookingFlow = Depends(get_flow)):
    try:
        result = await flow.submit()
    except FlowStateError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if result.action == "in_flight":
        raise HTTPException(status_code=409, detail=result.notification)
    if result.action == "failed":
        raise HTTPException(status_code=502, detail=result.notification)
    return SubmitResponseSchema(notification=result.notification, session=SessionResponseSchema.from_flow(flow))


def _apply(action) -> None:
    try:
        action()
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except FlowStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
