from pydantic import BaseModel


# Error body for rule refusals (409)
class ErrorResponse(BaseModel):
    error: str
    message: str


class HealthResponse(BaseModel):
    status: str
