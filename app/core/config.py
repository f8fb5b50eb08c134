from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Sky Park API"
    API_V1_STR: str = "/api/v1"

    # Comma-separated origins for CORS. Empty means allow all (local dev).
    CORS_ORIGINS: str = ""

    LOG_LEVEL: str = "INFO"

    # Used when an availability request does not say how big the park is
    DEFAULT_PARK_CAPACITY: int = 100

    BOOKING_NUMBER_PREFIX: str = "SKP"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )

    def cors_origins(self) -> List[str]:
        if not self.CORS_ORIGINS:
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
