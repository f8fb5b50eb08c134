"""
Booking lifecycle rules.

Pure predicates over a booking snapshot and the current time. Nothing here
executes a transition or touches storage; callers own the records.

    pending -> confirmed -> checked_in -> completed
    pending | confirmed -> cancelled | no_show

A booking is anything exposing the booking record attributes (ORM row or
`BookingRecord` schema).
"""
from datetime import datetime, timedelta
from typing import FrozenSet

from app.models.booking import BookingStatus
from app.utils.lookups import exhaustive
from app.utils.timeutils import as_utc, visit_moment

# Confirmed bookings can be cancelled up to this long before the visit
CANCELLATION_CUTOFF = timedelta(hours=2)

# Distance from the visit (either side) within which check-in is open
CHECK_IN_WINDOW = timedelta(days=1)

BOOKING_STATUS_LABELS = exhaustive({
    BookingStatus.pending: "Ожидает подтверждения",
    BookingStatus.confirmed: "Подтверждено",
    BookingStatus.checked_in: "Зарегистрирован",
    BookingStatus.completed: "Завершено",
    BookingStatus.cancelled: "Отменено",
    BookingStatus.no_show: "Не явился",
}, BookingStatus)

BOOKING_STATUS_COLORS = exhaustive({
    BookingStatus.pending: "yellow",
    BookingStatus.confirmed: "blue",
    BookingStatus.checked_in: "green",
    BookingStatus.completed: "green",
    BookingStatus.cancelled: "red",
    BookingStatus.no_show: "red",
}, BookingStatus)

BOOKING_TRANSITIONS = exhaustive({
    BookingStatus.pending: frozenset({BookingStatus.confirmed, BookingStatus.cancelled, BookingStatus.no_show}),
    BookingStatus.confirmed: frozenset({BookingStatus.checked_in, BookingStatus.cancelled, BookingStatus.no_show}),
    BookingStatus.checked_in: frozenset({BookingStatus.completed}),
    BookingStatus.completed: frozenset(),
    BookingStatus.cancelled: frozenset(),
    BookingStatus.no_show: frozenset(),
}, BookingStatus)


def total_guests(booking) -> int:
    return booking.adults_count + booking.children_count


def status_label(status: BookingStatus) -> str:
    return BOOKING_STATUS_LABELS[BookingStatus(status)]


def status_color(status: BookingStatus) -> str:
    return BOOKING_STATUS_COLORS[BookingStatus(status)]


def allowed_transitions(status: BookingStatus) -> FrozenSet[BookingStatus]:
    return BOOKING_TRANSITIONS[BookingStatus(status)]


def is_terminal(status: BookingStatus) -> bool:
    return not BOOKING_TRANSITIONS[BookingStatus(status)]


def can_transition(current: BookingStatus, target: BookingStatus) -> bool:
    return BookingStatus(target) in allowed_transitions(current)


def can_cancel(booking, now: datetime) -> bool:
    """
    Pending bookings can always be cancelled. Confirmed ones only while the
    visit is strictly more than CANCELLATION_CUTOFF away.
    """
    if booking.status == BookingStatus.pending:
        return True
    if booking.status == BookingStatus.confirmed:
        return visit_moment(booking) - as_utc(now) > CANCELLATION_CUTOFF
    return False


def can_check_in(booking, now: datetime) -> bool:
    """
    Confirmed bookings whose visit is less than a day away in either
    direction. This is a distance check, not calendar-day equality.
    """
    if booking.status != BookingStatus.confirmed:
        return False
    return abs(visit_moment(booking) - as_utc(now)) < CHECK_IN_WINDOW
