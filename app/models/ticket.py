import uuid
import enum
from sqlalchemy import Column, String, DateTime, func, DECIMAL, Integer, Text, ForeignKey, Enum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.db.base_class import Base

class TicketStatus(str, enum.Enum):
    active = "active"
    used = "used"
    expired = "expired"
    cancelled = "cancelled"

class TicketType(str, enum.Enum):
    adult = "adult"
    child = "child"
    group = "group"
    vip = "vip"

class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    ticket_number = Column(String(32), unique=True, nullable=False, index=True)
    booking_id = Column(UUID(as_uuid=True), ForeignKey("bookings.id"), nullable=False, index=True)
    user_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    type = Column(Enum(TicketType, name="ticket_type"), nullable=False)
    status = Column(Enum(TicketStatus, name="ticket_status"), nullable=False, default=TicketStatus.active, index=True)

    holder_name = Column(String(200), nullable=False)
    holder_age = Column(Integer, nullable=True) # 0-120
    price = Column(DECIMAL(10, 2), nullable=False)

    valid_from = Column(DateTime(timezone=True), nullable=False)
    valid_to = Column(DateTime(timezone=True), nullable=False)

    # Opaque token compared on scan; never the JSON printed into the code
    qr_code = Column(String(255), unique=True, nullable=False)

    used_at = Column(DateTime(timezone=True), nullable=True)
    used_by = Column(UUID(as_uuid=True), nullable=True) # staff member

    special_requirements = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    booking = relationship("Booking", back_populates="tickets")
