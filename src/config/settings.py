# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for sidecar naming, dependency parsing policy and
logging.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Sidecar files ===
    fingerprint_extension: str = "command"
    msvc_deps_extension: str = "json"
    gnu_deps_extension: str = "dep"

    # === Dependency parsing ===
    default_toolchain: Literal["msvc", "gnu"] = "gnu"
    empty_deps_is_unknown: bool = True

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator(
        "fingerprint_extension", "msvc_deps_extension", "gnu_deps_extension"
    )
    @classmethod
    def validate_extension(cls, v: str) -> str:  # noqa: N805
        """Extensions are bare markers: no dot, no path separator."""
        v = v.strip()
        if not v:
            raise ValueError("sidecar extension must not be empty")
        if "." in v or "/" in v or "\\" in v:
            raise ValueError(f"sidecar extension {v!r} must not contain '.' or '/'")
        return v

    @field_validator("log_retention")
    @classmethod
    def validate_retention(cls, v: int) -> int:  # noqa: N805
        if v < 0:
            raise ValueError("log_retention must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Sidecars share the output's stem, so their markers must differ."""
        markers = {
            "FINGERPRINT_EXTENSION": self.fingerprint_extension,
            "MSVC_DEPS_EXTENSION": self.msvc_deps_extension,
            "GNU_DEPS_EXTENSION": self.gnu_deps_extension,
        }
        seen: dict[str, str] = {}
        errors: list[str] = []
        for name, value in markers.items():
            key = value.lower()
            if key in seen:
                errors.append(f"{name} collides with {seen[key]} ({value!r})")
            else:
                seen[key] = name

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-build config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
