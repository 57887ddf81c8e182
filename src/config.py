"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Geo Distance API"
    environment: str = "development"  # development | production

    # Logging: DEBUG in development, INFO otherwise, unless set explicitly
    log_level: Optional[str] = None

    # Rate limiting
    rate_limit: str = "100/minute"
    rate_limit_enabled: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def effective_log_level(self) -> str:
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.is_development else "INFO"


settings = Settings()
