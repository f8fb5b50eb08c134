from uuid import UUID

from fastapi import APIRouter

from app.core.config import settings
from app.schemas.availability import AvailabilityRequest, BookingAvailability
from app.utils.availability import park_availability

router = APIRouter(prefix="/parks", tags=["Parks"])


@router.post("/{park_id}/availability", response_model=BookingAvailability)
def get_park_availability(park_id: UUID, data: AvailabilityRequest):
    """
    Remaining capacity for a park day, whole-day and per time slot, computed
    from the bookings snapshot in the request. A point-in-time view only: it
    does not hold capacity for the caller.
    """
    total_capacity = (
        data.total_capacity if data.total_capacity is not None else settings.DEFAULT_PARK_CAPACITY
    )
    return park_availability(
        park_id=park_id,
        on_date=data.date,
        total_capacity=total_capacity,
        slots={slot.time: slot.capacity for slot in data.time_slots},
        bookings=data.bookings,
    )
