# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    DATABASE_URL: str = Field(default="sqlite:///./tickets.db")
    APP_NAME: str = "Ticket Access Service"
    APP_DESC: str = "Support tickets with owner/admin access control"
    APP_VERSION: str = "1.0.0"

    # Comma separated, "*" allows all
    CORS_ORIGINS: str = "*"

    # HS256 wants at least 32 bytes
    JWT_SECRET: str = Field(default="change-me-to-a-random-32-byte-secret")
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_DAYS: int = 30

    LOG_LEVEL: str = "INFO"

    # e.g. {"not_authorized": 403}
    ERROR_STATUS_OVERRIDES: dict[str, int] = Field(default_factory=dict)

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
