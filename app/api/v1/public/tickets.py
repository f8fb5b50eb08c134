from fastapi import APIRouter

from app.models.ticket import TicketStatus, TicketType
from app.schemas.ticket import (
    TicketRecord,
    TicketValidityRequest,
    TicketValidity,
    QrPayload,
    QrPayloadResponse,
    LabelEntry,
    TicketCatalog,
)
from app.utils import ticket_rules
from app.utils.timeutils import utcnow

router = APIRouter(prefix="/tickets", tags=["Tickets"])


@router.get("/catalog", response_model=TicketCatalog)
def get_ticket_catalog():
    """Display labels for ticket statuses and types."""
    return TicketCatalog(
        statuses=[
            LabelEntry(value=s.value, label=ticket_rules.status_label(s), color=ticket_rules.status_color(s))
            for s in TicketStatus
        ],
        types=[LabelEntry(value=t.value, label=ticket_rules.type_label(t)) for t in TicketType],
    )


@router.post("/validity", response_model=TicketValidity)
def evaluate_ticket(data: TicketValidityRequest):
    ticket = data.ticket
    now = data.now or utcnow()
    return TicketValidity(
        id=ticket.id,
        ticket_number=ticket_rules.format_ticket_number(ticket.ticket_number),
        status=ticket.status,
        status_label=ticket_rules.status_label(ticket.status),
        status_color=ticket_rules.status_color(ticket.status),
        type_label=ticket_rules.type_label(ticket.type),
        is_valid=ticket_rules.is_valid(ticket, now),
        can_use=ticket_rules.can_use(ticket, now),
        age_in_days=ticket_rules.age_in_days(ticket, now),
        evaluated_at=now,
    )


@router.post("/qr-payload", response_model=QrPayloadResponse)
def build_qr_payload(ticket: TicketRecord):
    """The JSON printed into the ticket's QR code, and its encoded string."""
    return QrPayloadResponse(
        payload=QrPayload(**ticket_rules.qr_payload(ticket)),
        data=ticket_rules.qr_code_data(ticket),
    )
