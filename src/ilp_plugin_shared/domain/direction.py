"""Direction of a transfer or message.

An object is either *directed* (``to`` and optionally ``from``) or uses
the deprecated single ``account`` field. Callers resolve the variant once
and branch on its type rather than on key presence.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

DEPRECATION_MESSAGE = 'switch from the "account" field to the "to" and "from" fields!'


class Directed(BaseModel):
    """Explicit ``to``/``from`` addressing."""

    model_config = {"frozen": True, "populate_by_name": True}

    to: str
    from_: str | None = Field(default=None, alias="from")


class LegacyAccount(BaseModel):
    """Deprecated ``account`` addressing; direction is not checked."""

    model_config = {"frozen": True}

    account: str


Direction = Directed | LegacyAccount


def uses_legacy_account(obj: Mapping[str, Any]) -> bool:
    return bool(obj.get("account"))


def resolve_direction(obj: Mapping[str, Any]) -> Direction:
    """Build the direction variant for an already field-checked object."""
    if uses_legacy_account(obj):
        return LegacyAccount(account=obj["account"])
    return Directed(to=obj["to"], from_=obj.get("from") or None)
