"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, medform.toml only contains
overrides. An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from datetime import date
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    timezone: str = "UTC"
    # Pin the evaluation day (e.g. for reproducible batch runs).
    today: date | None = None

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"Unknown timezone: {value}"
            raise ValueError(msg) from exc
        return value


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=40)
