"""Classification enums for validated objects."""

from __future__ import annotations

from enum import StrEnum


class Flow(StrEnum):
    """Which side of the plugin an object is crossing."""

    INCOMING = "incoming"
    OUTGOING = "outgoing"


class Addressing(StrEnum):
    """How an object names its counterparty."""

    DIRECTED = "directed"
    LEGACY_ACCOUNT = "legacy_account"
