"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, facportal.toml only contains
overrides. A fresh portal needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- facportal.toml sections ---


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    min_year: int = 1900
    min_age: int = 18


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    dirname: str = ".facportal"
    filename: str = "facportal.db"
