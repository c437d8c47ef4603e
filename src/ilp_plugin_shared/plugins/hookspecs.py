"""Pluggy hook specifications for ilp_plugin_shared events.

Fired after an object passes validation and normalization, with the
canonical object as payload.
"""

from __future__ import annotations

from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("ilp_plugin_shared")
hookimpl = pluggy.HookimplMarker("ilp_plugin_shared")


class LedgerPluginHookSpec:
    """Hook specifications for ledger plugin events."""

    @hookspec
    def incoming_transfer(self, transfer: dict[str, Any]) -> None:
        """Called after an incoming transfer is normalized."""

    @hookspec
    def outgoing_transfer(self, transfer: dict[str, Any]) -> None:
        """Called after an outgoing transfer is normalized."""

    @hookspec
    def incoming_message(self, message: dict[str, Any]) -> None:
        """Called after an incoming message is normalized."""

    @hookspec
    def outgoing_message(self, message: dict[str, Any]) -> None:
        """Called after an outgoing message is normalized."""
