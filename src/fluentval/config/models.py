"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fluentval.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class DemoConfig(BaseModel):
    """[demo] section — parameters of the sample validator."""

    model_config = {"frozen": True}

    not_empty: bool = True
    max_length: int | None = 20
    forbidden: str | None = "foo"
