"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, lenguard.toml only contains
overrides.  An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

from lenguard.domain.policies import LengthPolicy


class AdaptersConfig(BaseModel):
    """[adapters] section."""

    model_config = {"frozen": True}

    hash_collections: bool = False
    plugins: bool = True


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    default_policy: LengthPolicy = LengthPolicy.SIMPLE

