import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.schemas.booking import BookingRecord
from app.schemas.ticket import TicketRecord

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def park_id():
    return uuid.uuid4()


@pytest.fixture
def make_booking():
    def _make(**overrides) -> BookingRecord:
        data = dict(
            id=uuid.uuid4(),
            booking_number="SKP-TEST0001",
            user_id=uuid.uuid4(),
            park_id=uuid.uuid4(),
            status="confirmed",
            visit_date=NOW + timedelta(days=3),
            adults_count=2,
            children_count=1,
            base_price=Decimal("1500"),
            total_amount=Decimal("1500"),
            contact_name="Айгуль Осмонова",
            contact_phone="+996555123456",
            created_at=NOW - timedelta(days=7),
            updated_at=NOW - timedelta(days=7),
        )
        data.update(overrides)
        return BookingRecord(**data)
    return _make


@pytest.fixture
def make_ticket():
    def _make(**overrides) -> TicketRecord:
        data = dict(
            id=uuid.uuid4(),
            ticket_number="skp-2025-000001",
            booking_id=uuid.uuid4(),
            user_id=uuid.uuid4(),
            type="child",
            status="active",
            holder_name="Нурлан",
            holder_age=7,
            price=Decimal("500"),
            valid_from=NOW - timedelta(hours=1),
            valid_to=NOW + timedelta(hours=1),
            qr_code="tok_3f9a1c",
            created_at=NOW - timedelta(days=2),
            updated_at=NOW - timedelta(days=2),
        )
        data.update(overrides)
        return TicketRecord(**data)
    return _make
