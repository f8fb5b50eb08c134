import logging
from typing import List

from fastapi import APIRouter, status

from app.core.errors import CancellationNotAllowed
from app.models.booking import BookingStatus
from app.schemas.booking import (
    BookingCreate,
    BookingDraft,
    BookingDecisionRequest,
    BookingDecision,
    BookingCancelRequest,
    BookingCancelResponse,
    BookingStatusInfo,
)
from app.schemas.common import ErrorResponse
from app.utils import booking_rules
from app.utils.references import generate_booking_number
from app.utils.timeutils import utcnow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["Bookings"])


def _sorted_statuses(statuses) -> List[BookingStatus]:
    order = list(BookingStatus)
    return sorted(statuses, key=order.index)


# ---------------------------------------------------------------------------
# GET /bookings/statuses - presentation tables
# ---------------------------------------------------------------------------


@router.get("/statuses", response_model=List[BookingStatusInfo])
def list_booking_statuses():
    """Label, color and legal next states for every booking status."""
    return [
        BookingStatusInfo(
            status=s,
            label=booking_rules.status_label(s),
            color=booking_rules.status_color(s),
            is_terminal=booking_rules.is_terminal(s),
            transitions=_sorted_statuses(booking_rules.allowed_transitions(s)),
        )
        for s in BookingStatus
    ]


# ---------------------------------------------------------------------------
# POST /bookings/drafts - validate the booking form
# ---------------------------------------------------------------------------


@router.post("/drafts", response_model=BookingDraft, status_code=status.HTTP_201_CREATED)
def create_booking_draft(data: BookingCreate):
    """
    Validate a booking form and return a pending draft with a fresh booking
    number. The draft is not stored: the booking store persists it and is
    responsible for booking-number uniqueness.
    """
    return BookingDraft(
        **data.model_dump(),
        booking_number=generate_booking_number(),
        status=BookingStatus.pending,
        total_guests=booking_rules.total_guests(data),
    )


# ---------------------------------------------------------------------------
# POST /bookings/decisions
# ---------------------------------------------------------------------------


@router.post("/decisions", response_model=BookingDecision)
def evaluate_booking(data: BookingDecisionRequest):
    """What the UI may offer for this booking right now."""
    booking = data.booking
    now = data.now or utcnow()
    return BookingDecision(
        id=booking.id,
        booking_number=booking.booking_number,
        status=booking.status,
        status_label=booking_rules.status_label(booking.status),
        status_color=booking_rules.status_color(booking.status),
        is_terminal=booking_rules.is_terminal(booking.status),
        allowed_transitions=_sorted_statuses(booking_rules.allowed_transitions(booking.status)),
        total_guests=booking_rules.total_guests(booking),
        can_cancel=booking_rules.can_cancel(booking, now),
        can_check_in=booking_rules.can_check_in(booking, now),
        evaluated_at=now,
    )


# ---------------------------------------------------------------------------
# POST /bookings/cancel
# ---------------------------------------------------------------------------


@router.post(
    "/cancel",
    response_model=BookingCancelResponse,
    responses={409: {"model": ErrorResponse}},
)
def cancel_booking(data: BookingCancelRequest):
    """
    Cancel a pending booking, or a confirmed one more than two hours ahead.
    Returns the cancelled projection for the booking store to apply.
    """
    booking = data.booking
    now = data.now or utcnow()
    if not booking_rules.can_cancel(booking, now):
        if booking.status == BookingStatus.confirmed:
            raise CancellationNotAllowed(
                "Confirmed bookings can only be cancelled more than "
                f"{int(booking_rules.CANCELLATION_CUTOFF.total_seconds() // 3600)} hours before the visit"
            )
        raise CancellationNotAllowed(
            f"Booking cannot be cancelled (current status: '{booking.status.value}')"
        )

    logger.info("Booking %s cancelled: %s", booking.booking_number, data.reason)
    return BookingCancelResponse(
        id=booking.id,
        booking_number=booking.booking_number,
        status=BookingStatus.cancelled,
        cancelled_at=now,
        reason=data.reason,
    )
