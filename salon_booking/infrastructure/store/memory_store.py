from __future__ import annotations

import time
from collections.abc import Callable

from salon_booking.application.ports.session_store import BookingSessionStorePort
from salon_booking.application.use_cases.booking_flow import BookingFlow


class MemoryBookingSessionStore(BookingSessionStorePort):
    """Process-local sessions. Drafts never outlive the process or the idle TTL."""

    def __init__(
        self,
        ttl_seconds: float = 3600.0,
        session_limit: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._flows: dict[str, BookingFlow] = {}
        self._touched_at: dict[str, float] = {}
        self._ttl_seconds = ttl_seconds
        self._session_limit = session_limit
        self._clock = clock

    def get(self, session_id: str) -> BookingFlow | None:
        self._evict_expired()
        flow = self._flows.get(session_id)
        if flow is not None:
            self._touched_at[session_id] = self._clock()
        return flow

    def put(self, flow: BookingFlow) -> None:
        self._evict_expired()
        if flow.session_id not in self._flows and len(self._flows) >= self._session_limit:
            # an in-flight submit keeps its session; if every slot is busy, go over the limit
            idle = [sid for sid in self._touched_at if not self._flows[sid].submitting]
            if idle:
                self.discard(min(idle, key=self._touched_at.__getitem__))
        self._flows[flow.session_id] = flow
        self._touched_at[flow.session_id] = self._clock()

    def discard(self, session_id: str) -> None:
        self._flows.pop(session_id, None)
        self._touched_at.pop(session_id, None)

    def _evict_expired(self) -> None:
        now = self._clock()
        expired = [sid for sid, ts in self._touched_at.items() if now - ts > self._ttl_seconds]
        for sid in expired:
            if self._flows[sid].submitting:
                continue
            self.discard(sid)
