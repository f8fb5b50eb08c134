from typing import Annotated, Optional, List
from pydantic import BaseModel, Field, UUID4
from decimal import Decimal
from datetime import datetime

from app.models.ticket import TicketStatus, TicketType

HolderName = Annotated[str, Field(min_length=1, max_length=200)]
HolderAge = Annotated[int, Field(ge=0, le=120)]
QrToken = Annotated[str, Field(min_length=1)]
Price = Annotated[Decimal, Field(ge=0)]


# Ticket: full record as stored by the ticket store
class TicketRecord(BaseModel):
    id: UUID4
    ticket_number: str
    booking_id: UUID4
    user_id: UUID4
    type: TicketType
    status: TicketStatus = TicketStatus.active

    holder_name: HolderName
    holder_age: Optional[HolderAge] = None
    price: Price

    valid_from: datetime
    valid_to: datetime

    qr_code: QrToken

    used_at: Optional[datetime] = None
    used_by: Optional[UUID4] = None

    special_requirements: Optional[str] = None
    notes: Optional[str] = None

    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TicketCreate(BaseModel):
    booking_id: UUID4
    type: TicketType
    holder_name: HolderName
    holder_age: Optional[HolderAge] = None
    price: Price
    valid_from: datetime
    valid_to: datetime
    special_requirements: Optional[str] = None
    notes: Optional[str] = None


class TicketUpdate(BaseModel):
    holder_name: Optional[HolderName] = None
    holder_age: Optional[HolderAge] = None
    special_requirements: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[TicketStatus] = None


# Bulk issue for one booking (POST /admin/tickets/drafts)
class BulkTicketItem(BaseModel):
    type: TicketType
    holder_name: HolderName
    holder_age: Optional[HolderAge] = None
    price: Price
    special_requirements: Optional[str] = None


class BulkTicketCreate(BaseModel):
    booking_id: UUID4
    tickets: Annotated[List[BulkTicketItem], Field(min_length=1)]
    valid_from: datetime
    valid_to: datetime
    notes: Optional[str] = None
    # Next free number in the store's yearly sequence
    first_sequence: Annotated[int, Field(ge=1)] = 1


class TicketDraft(TicketCreate):
    ticket_number: str
    qr_code: str
    status: TicketStatus = TicketStatus.active


class TicketValidityRequest(BaseModel):
    ticket: TicketRecord
    now: Optional[datetime] = None


class TicketValidity(BaseModel):
    id: UUID4
    ticket_number: str
    status: TicketStatus
    status_label: str
    status_color: str
    type_label: str
    is_valid: bool
    can_use: bool
    age_in_days: int
    evaluated_at: datetime


# What the scanner sends for a physical code
class TicketValidateRequest(BaseModel):
    qr_code: QrToken
    park_id: UUID4
    staff_id: UUID4
    location: Optional[str] = None


class TicketScanRequest(BaseModel):
    ticket: TicketRecord
    scan: TicketValidateRequest
    now: Optional[datetime] = None


class TicketValidationResponse(BaseModel):
    valid: bool
    can_enter: bool
    reason: str
    message: str
    ticket_number: str
    holder_name: str
    type_label: str
    status_label: str


# Projection encoded into the printed QR code
class QrPayload(BaseModel):
    id: str
    number: str
    qr: str
    booking: str
    type: TicketType
    valid_from: str
    valid_to: str


class QrPayloadResponse(BaseModel):
    payload: QrPayload
    data: str


class LabelEntry(BaseModel):
    value: str
    label: str
    color: Optional[str] = None


class TicketCatalog(BaseModel):
    statuses: List[LabelEntry]
    types: List[LabelEntry]
