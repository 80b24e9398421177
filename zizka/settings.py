"""Runtime settings with environment variable support (prefix ``ZIZKA_``)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or ``.env``."""

    log_level: str = "INFO"
    log_json: bool = True
    issuing_system: str = "zizka"
    # Extension of the file written beside the invoice YAML
    output_suffix: str = ".isdoc"
    validate_output: bool = True
    # Optional official ISDOC XSD; structural checks only when unset
    isdoc_xsd_path: Optional[Path] = None

    model_config = SettingsConfigDict(env_prefix="ZIZKA_", env_file=".env", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        up = value.upper()
        if up not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            return "INFO"
        return up

    @field_validator("output_suffix")
    @classmethod
    def _leading_dot(cls, value: str) -> str:
        return value if value.startswith(".") else f".{value}"


# Global settings instance
settings = Settings()
