"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ilp-plugin.toml only contains
overrides. A usable config needs only [ledger] account and prefix.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LedgerConfig(BaseModel):
    """[ledger] section — identity of the local plugin."""

    model_config = {"frozen": True}

    account: str = ""
    prefix: str = ""
    currency_code: str | None = None
    currency_scale: int | None = None


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    load_entry_points: bool = True


class SharedConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
