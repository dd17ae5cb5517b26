"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``fnkit.toml`` only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class MemoConfig(BaseModel):
    """[memo] section.

    ``maxsize`` of None keeps every ``pure`` cache unbounded.
    """

    model_config = {"frozen": True}

    maxsize: int | None = Field(default=None, gt=0)


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False
