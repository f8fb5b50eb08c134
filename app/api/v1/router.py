from fastapi import APIRouter

# Public - booking decisions, cancel, drafts
from app.api.v1.public.bookings import router as bookings_router

# Public - ticket validity and QR projection
from app.api.v1.public.tickets import router as tickets_router

# Public - park availability
from app.api.v1.public.parks import router as parks_router

# Admin - front desk and entrance scanner
from app.api.v1.admin.bookings import router as admin_bookings_router
from app.api.v1.admin.tickets import router as admin_tickets_router

api_router = APIRouter()

# --- Public ---
api_router.include_router(bookings_router)
api_router.include_router(tickets_router)
api_router.include_router(parks_router)

# --- Admin ---
api_router.include_router(admin_bookings_router)
api_router.include_router(admin_tickets_router)
