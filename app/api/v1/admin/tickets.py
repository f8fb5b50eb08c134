import logging
from typing import List

from fastapi import APIRouter, status

from app.core.errors import TicketMismatch
from app.schemas.common import ErrorResponse
from app.schemas.ticket import (
    BulkTicketCreate,
    TicketDraft,
    TicketScanRequest,
    TicketValidationResponse,
)
from app.utils import ticket_rules
from app.utils.references import generate_qr_token, generate_ticket_number
from app.utils.timeutils import utcnow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/tickets", tags=["Admin - Tickets"])


@router.post(
    "/scan",
    response_model=TicketValidationResponse,
    responses={409: {"model": ErrorResponse}},
)
def scan_ticket(data: TicketScanRequest):
    """
    Entrance scanner decision.

    The presented code must carry the ticket's stored token. A matching but
    unusable ticket is not an error: the response says why entry is refused.
    """
    ticket = data.ticket
    if not ticket_rules.qr_token_matches(ticket, data.scan.qr_code):
        logger.warning(
            "QR mismatch for ticket %s at park %s (staff %s)",
            ticket.ticket_number, data.scan.park_id, data.scan.staff_id,
        )
        raise TicketMismatch("Presented QR code does not belong to this ticket")

    now = data.now or utcnow()
    result = ticket_rules.validation_result(ticket, now)
    logger.info(
        "Scan %s at park %s by %s: %s",
        ticket.ticket_number, data.scan.park_id, data.scan.staff_id, result["reason"],
    )
    return TicketValidationResponse(
        **result,
        ticket_number=ticket_rules.format_ticket_number(ticket.ticket_number),
        holder_name=ticket.holder_name,
        type_label=ticket_rules.type_label(ticket.type),
        status_label=ticket_rules.status_label(ticket.status),
    )


@router.post("/drafts", response_model=List[TicketDraft], status_code=status.HTTP_201_CREATED)
def create_ticket_drafts(data: BulkTicketCreate):
    """
    Issue one draft ticket per holder with sequential numbers and fresh QR
    tokens. Drafts are returned for the ticket store to persist.
    """
    year = data.valid_from.year
    return [
        TicketDraft(
            booking_id=data.booking_id,
            type=item.type,
            holder_name=item.holder_name,
            holder_age=item.holder_age,
            price=item.price,
            valid_from=data.valid_from,
            valid_to=data.valid_to,
            special_requirements=item.special_requirements,
            notes=data.notes,
            ticket_number=generate_ticket_number(year, data.first_sequence + offset),
            qr_code=generate_qr_token(),
        )
        for offset, item in enumerate(data.tickets)
    ]
