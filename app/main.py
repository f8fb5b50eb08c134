from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.errors import BookingRuleError, booking_rule_error_handler
from app.core.logging_config import configure_logging
from app.api.v1.router import api_router
from app.schemas.common import HealthResponse

configure_logging()

app = FastAPI(title=settings.PROJECT_NAME)

# Set all CORS enabled origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(BookingRuleError, booking_rule_error_handler)

app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/health", response_model=HealthResponse)
def health():
    return {"status": "ok"}
