"""Runtime settings for fungi.

fungi itself has no tunables beyond how it logs. ``FungiSettings`` reads those
from ``FUNGI_``-prefixed environment variables (or a ``.env`` file) so an
application can switch the library to debug output without code changes.

Examples:
    >>> from fungi.settings import FungiSettings
    >>> FungiSettings(log_level="debug").log_level
    'DEBUG'

Tags:
    settings, configuration, pydantic, environment, fungi

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fungi.logging import resolve_level


class FungiSettings(BaseSettings):
    """Logging settings for the fungi library.

    Fields
    ──────
    log_level    : Minimum level emitted by fungi loggers
    json_logs    : True for JSON, False for console, None to auto-detect
    service_name : Value of ``service.name`` on every log event
    """

    model_config = SettingsConfigDict(
        env_prefix="FUNGI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    json_logs: bool | None = None
    service_name: str = Field(default="fungi", min_length=1)

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        resolve_level(value)
        return value.strip().upper()

    @property
    def numeric_level(self) -> int:
        return resolve_level(self.log_level)


__all__ = ["FungiSettings"]
