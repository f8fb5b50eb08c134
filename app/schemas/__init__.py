from app.schemas.common import ErrorResponse, HealthResponse
from app.schemas.booking import (
    BookingRecord, BookingCreate, BookingUpdate, BookingDraft,
    BookingDecisionRequest, BookingDecision,
    BookingCancelRequest, BookingCancelResponse,
    CheckInRequest, BookingCheckInResponse, BookingStatusInfo,
)
from app.schemas.ticket import (
    TicketRecord, TicketCreate, TicketUpdate,
    BulkTicketItem, BulkTicketCreate, TicketDraft,
    TicketValidityRequest, TicketValidity,
    TicketValidateRequest, TicketScanRequest, TicketValidationResponse,
    QrPayload, QrPayloadResponse, LabelEntry, TicketCatalog,
)
from app.schemas.availability import (
    TimeSlotCapacity, AvailabilityRequest, TimeSlotAvailability, BookingAvailability,
)
