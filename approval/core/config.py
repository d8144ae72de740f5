"""Configuration management for the approval service."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

_DEFAULT_LOGGING_CONFIG = Path(__file__).resolve().parent / "../.." / "configs" / "logging.yaml"


class Settings(BaseSettings):
    app_name: str = Field(default="Approval Service")
    version: str = Field(default="0.1.0")
    docs_url: str | None = Field(default="/docs")
    redoc_url: str | None = Field(default="/redoc")
    openapi_url: str = Field(default="/openapi.json")

    database_url: str = Field(default="postgresql+psycopg://approval:approval@db:5432/approval")
    database_echo: bool = Field(default=False)

    logging_config_path: Path = Field(default=_DEFAULT_LOGGING_CONFIG)

    enable_metrics: bool = Field(default=True)
    enable_tracing: bool = Field(default=True)
    otel_exporter_endpoint: str | None = Field(default=None)
    enable_audit_log: bool = Field(default=True)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings"]
