"""Ticket validity and usage rules, plus the QR projection printed on tickets."""
import hmac
import json
import math
from datetime import datetime, timedelta

from app.models.ticket import TicketStatus, TicketType
from app.utils.lookups import exhaustive
from app.utils.timeutils import as_utc, isoformat_utc

TICKET_STATUS_LABELS = exhaustive({
    TicketStatus.active: "Активный",
    TicketStatus.used: "Использован",
    TicketStatus.expired: "Истек",
    TicketStatus.cancelled: "Отменен",
}, TicketStatus)

TICKET_STATUS_COLORS = exhaustive({
    TicketStatus.active: "green",
    TicketStatus.used: "blue",
    TicketStatus.expired: "gray",
    TicketStatus.cancelled: "red",
}, TicketStatus)

TICKET_TYPE_LABELS = exhaustive({
    TicketType.adult: "Взрослый",
    TicketType.child: "Детский",
    TicketType.group: "Групповой",
    TicketType.vip: "VIP",
}, TicketType)


def status_label(status: TicketStatus) -> str:
    return TICKET_STATUS_LABELS[TicketStatus(status)]


def status_color(status: TicketStatus) -> str:
    return TICKET_STATUS_COLORS[TicketStatus(status)]


def type_label(ticket_type: TicketType) -> str:
    return TICKET_TYPE_LABELS[TicketType(ticket_type)]


def format_ticket_number(ticket_number: str) -> str:
    return ticket_number.upper()


def is_valid(ticket, now: datetime) -> bool:
    """Active and inside the inclusive [valid_from, valid_to] window."""
    if ticket.status != TicketStatus.active:
        return False
    now = as_utc(now)
    return as_utc(ticket.valid_from) <= now <= as_utc(ticket.valid_to)


def can_use(ticket, now: datetime) -> bool:
    # Valid but already scanned is reported separately from invalid
    return is_valid(ticket, now) and ticket.used_at is None


def age_in_days(ticket, now: datetime) -> int:
    """Whole days since creation. Negative when created_at is after now."""
    return math.floor((as_utc(now) - as_utc(ticket.created_at)) / timedelta(days=1))


def qr_payload(ticket) -> dict:
    """
    The record encoded into a printed/scanned QR code.

    `qr` carries the stored token, but the payload itself is a projection:
    nothing reads it back as ticket state.
    """
    return {
        "id": str(ticket.id),
        "number": ticket.ticket_number,
        "qr": ticket.qr_code,
        "booking": str(ticket.booking_id),
        "type": TicketType(ticket.type).value,
        "valid_from": isoformat_utc(ticket.valid_from),
        "valid_to": isoformat_utc(ticket.valid_to),
    }


def qr_code_data(ticket) -> str:
    return json.dumps(qr_payload(ticket), separators=(",", ":"), ensure_ascii=False)


def qr_token_matches(ticket, presented: str) -> bool:
    return hmac.compare_digest(ticket.qr_code.encode(), presented.encode())


def validation_result(ticket, now: datetime) -> dict:
    """
    Scanner decision for a ticket at `now`.

    reason is one of: ok, already_used, not_yet_valid, expired_window,
    status_<status>.
    """
    if can_use(ticket, now):
        return {"valid": True, "can_enter": True, "reason": "ok", "message": "Ticket is valid"}

    if is_valid(ticket, now):
        return {
            "valid": True,
            "can_enter": False,
            "reason": "already_used",
            "message": f"Ticket was already used at {isoformat_utc(ticket.used_at)}",
        }

    status = TicketStatus(ticket.status)
    if status != TicketStatus.active:
        return {
            "valid": False,
            "can_enter": False,
            "reason": f"status_{status.value}",
            "message": f"Ticket is {status.value}",
        }

    if as_utc(now) < as_utc(ticket.valid_from):
        return {
            "valid": False,
            "can_enter": False,
            "reason": "not_yet_valid",
            "message": f"Ticket is valid from {isoformat_utc(ticket.valid_from)}",
        }
    return {
        "valid": False,
        "can_enter": False,
        "reason": "expired_window",
        "message": f"Ticket validity ended at {isoformat_utc(ticket.valid_to)}",
    }
