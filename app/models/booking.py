import uuid
import enum
from sqlalchemy import Column, String, DateTime, func, DECIMAL, Integer, Text, Date, Enum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.db.base_class import Base

class BookingStatus(str, enum.Enum):
    pending = "pending"
    confirmed = "confirmed"
    checked_in = "checked_in"
    completed = "completed"
    cancelled = "cancelled"
    no_show = "no_show"

DEFAULT_DURATION_HOURS = 3
MIN_DURATION_HOURS = 0.5
MAX_DURATION_HOURS = 8

class Booking(Base):
    __tablename__ = "bookings"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    booking_number = Column(String(20), unique=True, nullable=False, index=True)
    # Opaque references owned by other services
    user_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    park_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    status = Column(Enum(BookingStatus, name="booking_status"), nullable=False, default=BookingStatus.pending, index=True)

    visit_date = Column(Date, nullable=False, index=True)
    visit_time = Column(String(5), nullable=True) # HH:MM, 24h
    duration_hours = Column(DECIMAL(3, 1), nullable=False, default=DEFAULT_DURATION_HOURS)

    adults_count = Column(Integer, nullable=False, default=0)
    children_count = Column(Integer, nullable=False, default=0)

    base_price = Column(DECIMAL(10, 2), nullable=False)
    discount_amount = Column(DECIMAL(10, 2), nullable=False, default=0)
    total_amount = Column(DECIMAL(10, 2), nullable=False)

    contact_name = Column(String(200), nullable=False)
    contact_phone = Column(String(13), nullable=False) # +996XXXXXXXXX
    contact_email = Column(String(255), nullable=True)

    special_requirements = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    admin_notes = Column(Text, nullable=True)

    checked_in_at = Column(DateTime(timezone=True), nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    cancelled_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    tickets = relationship("Ticket", back_populates="booking", cascade="all, delete-orphan")
