from typing import Annotated, Optional, List
from uuid import UUID
from pydantic import BaseModel, Field
from datetime import date

from app.schemas.booking import BookingRecord
from app.utils.timeutils import HHMM_PATTERN


class TimeSlotCapacity(BaseModel):
    time: Annotated[str, Field(pattern=HHMM_PATTERN)]
    capacity: Annotated[int, Field(ge=0)]


# Request for POST /parks/{park_id}/availability
class AvailabilityRequest(BaseModel):
    date: date
    total_capacity: Optional[Annotated[int, Field(ge=0)]] = None   # falls back to DEFAULT_PARK_CAPACITY
    time_slots: List[TimeSlotCapacity] = []
    bookings: List[BookingRecord] = []


class TimeSlotAvailability(BaseModel):
    time: str
    capacity: int
    booked: int
    available: int
    is_available: bool


class BookingAvailability(BaseModel):
    park_id: UUID
    date: date
    total_capacity: int
    current_bookings: int
    available_slots: int
    is_fully_booked: bool
    time_slots: List[TimeSlotAvailability]
