# SPDX-License-Identifier: Apache-2.0
"""All configuration via environment variables (12-factor). No hardcoded values."""
from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CEREMONY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Session
    participant_count: int = Field(default=3, ge=1, le=1024, description="Fixed group size N")
    seed_size: int = Field(default=32, ge=16, le=64, description="Shared seed length in bytes")
    max_name_length: int = Field(default=200, ge=1, le=2000, description="Max display name length")

    # Cryptographic backend
    backend: str = Field(default="masked-sum", description="Name of the registered crypto backend")
    rollback_on_backend_failure: bool = Field(
        default=True,
        description="Re-open the session for another run() when aggregation/evaluation fails",
    )

    # HTTP
    allowed_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )
    run_rate_limit: str = Field(default="30/minute", description="slowapi limit for POST /run, per app")
    production: bool = Field(default=False, description="Enables HSTS header")

    # Logging
    log_level: str = Field(default="INFO", description="Level for the 'ceremony' logger")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return value


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Attach a stream handler to the 'ceremony' logger tree."""
    logger = logging.getLogger("ceremony")
    logger.setLevel(level or settings.log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
