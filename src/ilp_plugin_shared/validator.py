"""Validator — field checks and canonical shapes for transfers and messages.

Every check raises :class:`InvalidFieldsError` before any output is built;
nothing is returned on failure and nothing is partially normalized.

INVARIANT: account and prefix are read from the plugin context on every
call. The validator holds no state of its own.
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ilp_plugin_shared.domain.direction import (
    DEPRECATION_MESSAGE,
    Direction,
    LegacyAccount,
    resolve_direction,
    uses_legacy_account,
)
from ilp_plugin_shared.domain.fields import (
    assert_account,
    assert_condition_or_preimage,
    assert_number,
    assert_object,
    assert_prefix,
    assert_string,
    both_or_neither,
    check,
)
from ilp_plugin_shared.errors import InvalidFieldsError

if TYPE_CHECKING:
    from ilp_plugin_shared.context import PluginContext

Transfer = dict[str, Any]
Message = dict[str, Any]


def _omit_none(obj: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in obj.items() if value is not None}


def _require_mapping(obj: Any, kind: str) -> None:
    if not isinstance(obj, Mapping):
        raise InvalidFieldsError(f"{kind} ({obj}) must be an object")


def _warn_legacy_account() -> None:
    warnings.warn(DEPRECATION_MESSAGE, DeprecationWarning, stacklevel=4)


class Validator:
    """Validates and normalizes transfers and messages for one plugin.

    Usage::

        validator = Validator(plugin=plugin)
        transfer = validator.normalize_outgoing_transfer(
            {"id": "1", "amount": "5", "to": "b"}
        )
    """

    def __init__(self, plugin: PluginContext) -> None:
        self._plugin = plugin

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------

    def normalize_outgoing_transfer(self, t: Transfer) -> Transfer:
        """Validate an outgoing transfer and return its canonical copy.

        ``from`` and ``ledger`` always come from the plugin context; a
        caller-supplied ledger is checked but never echoed.
        """
        self.validate_outgoing_transfer(t)
        return _omit_none(
            {
                "id": t.get("id"),
                "to": t.get("to") or t.get("account"),
                "amount": t.get("amount"),
                "from": self._plugin.get_account(),
                "ledger": self._plugin.get_info().prefix,
                "ilp": t.get("ilp"),
                "executionCondition": t.get("executionCondition"),
                "expiresAt": t.get("expiresAt"),
                "custom": t.get("custom"),
                "noteToSelf": t.get("noteToSelf"),
            }
        )

    def normalize_incoming_transfer(self, t: Transfer) -> Transfer:
        """Validate an incoming transfer and return its canonical copy.

        The sender's ``to``/``from`` are kept as given. ``ledger`` is kept
        when supplied and filled from the context otherwise. ``noteToSelf``
        is an outgoing-only annotation and is dropped.
        """
        self.validate_incoming_transfer(t)
        return _omit_none(
            {
                "id": t.get("id"),
                "amount": t.get("amount"),
                "to": t.get("to"),
                "from": t.get("from"),
                "ledger": t.get("ledger") or self._plugin.get_info().prefix,
                "ilp": t.get("ilp"),
                "executionCondition": t.get("executionCondition"),
                "expiresAt": t.get("expiresAt"),
                "custom": t.get("custom"),
            }
        )

    def normalize_outgoing_message(self, m: Message) -> Message:
        self.validate_outgoing_message(m)
        return m

    def normalize_incoming_message(self, m: Message) -> Message:
        self.validate_incoming_message(m)
        return m

    # ------------------------------------------------------------------
    # Transfers
    # ------------------------------------------------------------------

    def validate_incoming_transfer(self, t: Transfer) -> Direction:
        direction = self.validate_transfer(t)
        if not isinstance(direction, LegacyAccount):
            self.assert_incoming(t)
        return direction

    def validate_outgoing_transfer(self, t: Transfer) -> Direction:
        direction = self.validate_transfer(t)
        if not isinstance(direction, LegacyAccount):
            self.assert_outgoing(t)
        return direction

    def validate_transfer(self, t: Transfer) -> Direction:
        """Check the direction-independent rules of a transfer.

        Returns the resolved direction. Objects using the legacy
        ``account`` field emit a :class:`DeprecationWarning` and skip the
        destination check.
        """
        _require_mapping(t, "transfer")
        check(t.get("id"), "must have an id")
        check(t.get("amount"), "must have an amount")

        assert_string(t.get("id"), "id")
        assert_number(t.get("amount"), "amount")
        assert_object(t.get("data"), "data")
        assert_object(t.get("noteToSelf"), "noteToSelf")
        assert_object(t.get("custom"), "custom")
        assert_condition_or_preimage(t.get("executionCondition"), "executionCondition")
        assert_string(t.get("expiresAt"), "expiresAt")

        if t.get("ledger"):
            assert_prefix(t["ledger"], self._plugin.get_info().prefix, "ledger")

        condition = t.get("executionCondition")
        expires_at = t.get("expiresAt")
        check(
            both_or_neither(condition, expires_at),
            f"executionCondition ({condition}) and expiresAt ({expires_at})"
            " must both be set if either is set",
        )

        return self._check_destination(t)

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def validate_incoming_message(self, m: Message) -> Direction:
        direction = self.validate_message(m)
        if not isinstance(direction, LegacyAccount):
            self.assert_incoming(m)
        return direction

    def validate_outgoing_message(self, m: Message) -> Direction:
        direction = self.validate_message(m)
        if not isinstance(direction, LegacyAccount):
            self.assert_outgoing(m)
        return direction

    def validate_message(self, m: Message) -> Direction:
        _require_mapping(m, "message")
        if m.get("ilp"):
            assert_string(m["ilp"], "ilp")

        if m.get("ledger"):
            assert_prefix(m["ledger"], self._plugin.get_info().prefix, "ledger")

        return self._check_destination(m)

    # ------------------------------------------------------------------
    # Fulfillments and direction
    # ------------------------------------------------------------------

    def validate_fulfillment(self, f: Any) -> None:
        check(f, f'fulfillment must not be "{f}"')
        assert_condition_or_preimage(f, "fulfillment")

    def assert_incoming(self, o: Mapping[str, Any]) -> None:
        """Reject objects addressed to anyone but the local account."""
        assert_account(o.get("to"), self._plugin.get_account(), "to")

    def assert_outgoing(self, o: Mapping[str, Any]) -> None:
        """Reject spoofed senders. ``from`` may be absent; normalization fills it."""
        if o.get("from"):
            assert_account(o["from"], self._plugin.get_account(), "from")

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _check_destination(self, o: Mapping[str, Any]) -> Direction:
        if uses_legacy_account(o):
            _warn_legacy_account()
            assert_string(o["account"], "account")
            return resolve_direction(o)

        check(o.get("to"), "must have a destination (.to)")
        assert_string(o.get("to"), "to")
        assert_string(o.get("from"), "from")
        return resolve_direction(o)
