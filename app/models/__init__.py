from app.models.booking import Booking, BookingStatus
from app.models.ticket import Ticket, TicketStatus, TicketType
