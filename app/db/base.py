# Import all models so Base.metadata sees every table
from app.db.base_class import Base
from app.models.booking import Booking
from app.models.ticket import Ticket
