import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class BookingRuleError(Exception):
    """A well-formed request that the booking/ticket rules refuse."""

    code = "rule_violation"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CancellationNotAllowed(BookingRuleError):
    code = "cancellation_not_allowed"


class CheckInNotAllowed(BookingRuleError):
    code = "check_in_not_allowed"


class TicketMismatch(BookingRuleError):
    code = "ticket_mismatch"


async def booking_rule_error_handler(request: Request, exc: BookingRuleError) -> JSONResponse:
    logger.info("Refused %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"error": exc.code, "message": exc.message},
    )
