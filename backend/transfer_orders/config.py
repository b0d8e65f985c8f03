"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Defaults provided for every setting: works out-of-the-box with no env vars

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Port 8000 by default: the historical port of the transfer API
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from transfer_orders.core.domain_types import INITIAL_SEQUENCE


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Application
    app_name: str = "Transfer Orders API"
    app_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = Field(8000, ge=1, le=65535)

    # Store
    initial_sequence: int = Field(INITIAL_SEQUENCE, ge=0)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
