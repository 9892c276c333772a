"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``viu.toml`` only carries
overrides. An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class FormattingConfig(BaseModel):
    """[formatting] section."""

    model_config = {"frozen": True}

    # Token format understood by output.formatters.format_date.
    date_format: str = "DD/MM/YYYY"


class SecurityConfig(BaseModel):
    """[security] section: password policy."""

    model_config = {"frozen": True}

    password_min_score: int = Field(default=4, ge=0, le=5)


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    # How unknown keys in CLI-validated payloads are treated.
    extra_keys: Literal["ignore", "allow", "forbid"] = "ignore"
