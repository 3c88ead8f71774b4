# helpdesk/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    DATABASE_URL: str = Field(default="sqlite:///./helpdesk.db")
    APP_NAME: str = "Helpdesk API"
    APP_DESC: str = "Requesters open tickets, agents answer them"
    APP_VERSION: str = "1.0.0"

    # Shared secret expected in the `token` header of every /api call
    API_TOKEN: str = "the-api-token"

    # CORS origins, comma separated. Everything allowed when unset.
    CORS_ORIGINS: str | None = None

    LOG_LEVEL: str = "INFO"

    # Delivery channels used for notifications: database, mail
    NOTIFICATION_CHANNELS: str = "database,mail"
    MAIL_FROM: str = "helpdesk@example.com"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        if not self.CORS_ORIGINS:
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def notification_channels(self) -> list[str]:
        return [c.strip() for c in self.NOTIFICATION_CHANNELS.split(",") if c.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
