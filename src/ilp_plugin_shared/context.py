"""Plugin context — the validator's only view of the local ledger.

The validator never caches what it reads here: account and prefix are
fetched on every call so a context that changes between calls is honored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel

if TYPE_CHECKING:
    from ilp_plugin_shared.config.settings import PluginSettings


class LedgerInfo(BaseModel):
    """Ledger metadata returned by ``get_info()``.

    Only ``prefix`` is required; plugins may attach anything else.
    """

    model_config = {"frozen": True, "extra": "allow"}

    prefix: str
    currency_code: str | None = None
    currency_scale: int | None = None
    connectors: list[str] = []


class PluginContext(Protocol):
    """What a ledger plugin exposes to the validator."""

    def get_account(self) -> str: ...

    def get_info(self) -> LedgerInfo: ...


class StaticPluginContext:
    """A plugin context with a fixed account and ledger info."""

    def __init__(self, account: str, info: LedgerInfo) -> None:
        self._account = account
        self._info = info

    def get_account(self) -> str:
        return self._account

    def get_info(self) -> LedgerInfo:
        return self._info

    @classmethod
    def from_settings(cls, settings: PluginSettings) -> StaticPluginContext:
        """Build a context from the ``[ledger]`` config section."""
        ledger = settings.ledger
        info = LedgerInfo(
            prefix=ledger.prefix,
            currency_code=ledger.currency_code,
            currency_scale=ledger.currency_scale,
        )
        return cls(ledger.account, info)
