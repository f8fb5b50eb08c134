from typing import Annotated, Optional, List, Union
from pydantic import BaseModel, EmailStr, Field, UUID4
from decimal import Decimal
from datetime import date, datetime

from app.models.booking import (
    BookingStatus,
    DEFAULT_DURATION_HOURS,
    MIN_DURATION_HOURS,
    MAX_DURATION_HOURS,
)
from app.utils.timeutils import HHMM_PATTERN

PHONE_PATTERN = r"^\+996[0-9]{9}$"

ContactName = Annotated[str, Field(min_length=1, max_length=200)]
ContactPhone = Annotated[str, Field(pattern=PHONE_PATTERN)]
VisitTime = Annotated[str, Field(pattern=HHMM_PATTERN)]
Duration = Annotated[float, Field(ge=MIN_DURATION_HOURS, le=MAX_DURATION_HOURS)]
GuestCount = Annotated[int, Field(ge=0)]
Money = Annotated[Decimal, Field(ge=0)]


# Booking: full record as stored by the booking store
class BookingRecord(BaseModel):
    id: UUID4
    booking_number: str
    user_id: UUID4
    park_id: UUID4
    status: BookingStatus = BookingStatus.pending

    visit_date: Union[datetime, date]
    visit_time: Optional[VisitTime] = None
    duration_hours: Duration = DEFAULT_DURATION_HOURS

    adults_count: GuestCount = 0
    children_count: GuestCount = 0

    base_price: Money
    discount_amount: Money = Decimal("0")
    total_amount: Money

    contact_name: ContactName
    contact_phone: ContactPhone
    contact_email: Optional[EmailStr] = None

    special_requirements: Optional[str] = None
    notes: Optional[str] = None
    admin_notes: Optional[str] = None

    checked_in_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# Booking: create form (POST /bookings/drafts)
class BookingCreate(BaseModel):
    park_id: UUID4
    visit_date: date
    visit_time: Optional[VisitTime] = None
    duration_hours: Duration = DEFAULT_DURATION_HOURS

    adults_count: GuestCount = 1
    children_count: GuestCount = 0

    contact_name: ContactName
    contact_phone: ContactPhone
    contact_email: Optional[EmailStr] = None

    special_requirements: Optional[str] = None
    notes: Optional[str] = None


# Booking: partial update (admin edit form)
class BookingUpdate(BaseModel):
    visit_date: Optional[date] = None
    visit_time: Optional[VisitTime] = None
    duration_hours: Optional[Duration] = None
    adults_count: Optional[GuestCount] = None
    children_count: Optional[GuestCount] = None
    contact_name: Optional[ContactName] = None
    contact_phone: Optional[ContactPhone] = None
    contact_email: Optional[EmailStr] = None
    special_requirements: Optional[str] = None
    notes: Optional[str] = None
    admin_notes: Optional[str] = None


# Draft returned for a validated create form; the caller's store persists it
class BookingDraft(BookingCreate):
    booking_number: str
    status: BookingStatus = BookingStatus.pending
    total_guests: int


class BookingDecisionRequest(BaseModel):
    booking: BookingRecord
    now: Optional[datetime] = None


class BookingDecision(BaseModel):
    id: UUID4
    booking_number: str
    status: BookingStatus
    status_label: str
    status_color: str
    is_terminal: bool
    allowed_transitions: List[BookingStatus]
    total_guests: int
    can_cancel: bool
    can_check_in: bool
    evaluated_at: datetime


class BookingCancelRequest(BaseModel):
    booking: BookingRecord
    reason: Annotated[str, Field(min_length=1, max_length=500)]
    now: Optional[datetime] = None


# Booking: cancel projection (POST /bookings/cancel)
class BookingCancelResponse(BaseModel):
    id: UUID4
    booking_number: str
    status: BookingStatus
    cancelled_at: datetime
    reason: str


class CheckInRequest(BaseModel):
    booking: BookingRecord
    actual_adults: Optional[GuestCount] = None
    actual_children: Optional[GuestCount] = None
    check_in_notes: Optional[str] = None
    now: Optional[datetime] = None


# Booking: check-in projection (POST /admin/bookings/check-in)
class BookingCheckInResponse(BaseModel):
    id: UUID4
    booking_number: str
    status: BookingStatus
    checked_in_at: datetime
    expected_guests: int
    actual_guests: int
    check_in_notes: Optional[str] = None


class BookingStatusInfo(BaseModel):
    status: BookingStatus
    label: str
    color: str
    is_terminal: bool
    transitions: List[BookingStatus]
