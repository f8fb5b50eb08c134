import logging

from fastapi import APIRouter

from app.core.errors import CheckInNotAllowed
from app.models.booking import BookingStatus
from app.schemas.booking import CheckInRequest, BookingCheckInResponse
from app.schemas.common import ErrorResponse
from app.utils import booking_rules
from app.utils.timeutils import utcnow

logger = logging.getLogger(__name__)

# Access control is enforced by the admin gateway in front of this service
router = APIRouter(prefix="/admin/bookings", tags=["Admin - Bookings"])


@router.post(
    "/check-in",
    response_model=BookingCheckInResponse,
    responses={409: {"model": ErrorResponse}},
)
def check_in_booking(data: CheckInRequest):
    """
    Check a party in at the front desk.

    Only confirmed bookings less than a day from their visit qualify. Actual
    head counts default to the booked ones.
    """
    booking = data.booking
    now = data.now or utcnow()
    if not booking_rules.can_check_in(booking, now):
        if booking.status != BookingStatus.confirmed:
            raise CheckInNotAllowed(
                f"Only confirmed bookings can be checked in (current status: '{booking.status.value}')"
            )
        raise CheckInNotAllowed("Check-in is only open within a day of the visit")

    adults = booking.adults_count if data.actual_adults is None else data.actual_adults
    children = booking.children_count if data.actual_children is None else data.actual_children
    expected = booking_rules.total_guests(booking)
    if adults + children != expected:
        logger.info(
            "Booking %s checked in with %d guests (booked %d)",
            booking.booking_number, adults + children, expected,
        )

    return BookingCheckInResponse(
        id=booking.id,
        booking_number=booking.booking_number,
        status=BookingStatus.checked_in,
        checked_in_at=now,
        expected_guests=expected,
        actual_guests=adults + children,
        check_in_notes=data.check_in_notes,
    )
