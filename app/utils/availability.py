"""
Read-side capacity projection for a park day.

Counts come from a snapshot the caller hands in. Nothing is reserved or
locked here: the reserve-or-reject decision belongs to a transactional store.
"""
from collections import Counter
from datetime import date
from typing import Dict, Iterable, Mapping, Tuple

from app.models.booking import BookingStatus
from app.utils.booking_rules import total_guests
from app.utils.timeutils import calendar_date, normalize_hhmm

# Statuses whose party occupies the park on the visit day
CAPACITY_HOLDING_STATUSES = frozenset({
    BookingStatus.pending,
    BookingStatus.confirmed,
    BookingStatus.checked_in,
    BookingStatus.completed,
})


def day_availability(total_capacity: int, current_bookings: int) -> dict:
    available_slots = total_capacity - current_bookings
    return {
        "available_slots": available_slots,
        # exactly full counts as fully booked
        "is_fully_booked": available_slots <= 0,
    }


def slot_availability(capacity: int, booked: int) -> dict:
    available = capacity - booked
    return {
        "available": available,
        "is_available": available > 0,
    }


def holds_capacity(booking) -> bool:
    return BookingStatus(booking.status) in CAPACITY_HOLDING_STATUSES


def occupancy(bookings: Iterable, park_id, on_date: date) -> Tuple[int, Dict[str, int]]:
    """
    Guests booked into `park_id` on `on_date`: the day total and a per-slot
    breakdown keyed by normalized HH:MM. Bookings without a visit time only
    count toward the day.
    """
    day_total = 0
    by_time: Counter = Counter()
    for booking in bookings:
        if str(booking.park_id) != str(park_id):
            continue
        if calendar_date(booking.visit_date) != on_date:
            continue
        if not holds_capacity(booking):
            continue
        guests = total_guests(booking)
        day_total += guests
        if booking.visit_time:
            by_time[normalize_hhmm(booking.visit_time)] += guests
    return day_total, dict(by_time)


def park_availability(
    park_id,
    on_date: date,
    total_capacity: int,
    slots: Mapping[str, int],
    bookings: Iterable,
) -> dict:
    """Whole-day and per-slot availability. `slots` maps HH:MM to slot capacity."""
    current, by_time = occupancy(bookings, park_id, on_date)

    time_slots = []
    for slot_time, capacity in sorted(
        ((normalize_hhmm(t), c) for t, c in slots.items()), key=lambda item: item[0]
    ):
        booked = by_time.get(slot_time, 0)
        time_slots.append({
            "time": slot_time,
            "capacity": capacity,
            "booked": booked,
            **slot_availability(capacity, booked),
        })

    return {
        "park_id": park_id,
        "date": on_date,
        "total_capacity": total_capacity,
        "current_bookings": current,
        **day_availability(total_capacity, current),
        "time_slots": time_slots,
    }
