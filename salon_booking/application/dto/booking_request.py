from __future__ import annotations

from pydantic import BaseModel, Field

from salon_booking.domain.entities.booking_draft import BookingDraft


class ClientContactDTO(BaseModel):
    name: str
    email: str
    phone: str


class BookingRequestDTO(BaseModel):
    branch_id: str | None
    staff_id: str | None = None
    service_ids: list[str] = Field(default_factory=list)
    date: str  # yyyy-mm-dd
    time: str  # HH:MM
    client: ClientContactDTO
    notes: str = ""

    @classmethod
    def from_draft(
        cls,
        draft: BookingDraft,
        branch_ref: str | None,
        staff_ref: str | None,
    ) -> "BookingRequestDTO":
        return cls(
            branch_id=branch_ref,
            staff_id=staff_ref,
            service_ids=[s.id for s in draft.services],
            date=draft.date.isoformat() if draft.date else "",
            time=draft.time or "",
            client=ClientContactDTO(
                name=draft.client_name,
                email=draft.client_email,
                phone=draft.client_phone,
            ),
            notes=draft.notes,
        )


class BookingResponseDTO(BaseModel):
    success: bool = True
    appointment_id: str | None = None
    message: str | None = None
    error: str | None = None
