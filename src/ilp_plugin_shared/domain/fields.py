"""Field-level assertions for transfers, messages and fulfillments.

Every helper raises :class:`InvalidFieldsError` with a message naming the
field and the offending value. Optional fields are checked only when
truthy: ``None``, ``""`` and ``0`` count as absent.

Amounts are parsed with :class:`decimal.Decimal` so that values such as
``"0.1000000000000000001"`` keep their full precision.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from ilp_plugin_shared.errors import InvalidFieldsError

# 32 bytes, base64url, no padding. Use fullmatch: `$` accepts a trailing newline.
CONDITION_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z0-9_-]{43}")

# ASCII decimal notation only. Decimal() also takes "1_000", " 5 " and non-ASCII digits.
AMOUNT_PATTERN: re.Pattern[str] = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

_ZERO = Decimal("0")


def check(cond: Any, msg: str) -> None:
    """Raise InvalidFieldsError with *msg* unless *cond* is truthy."""
    if not cond:
        raise InvalidFieldsError(msg)


def assert_string(value: Any, name: str) -> None:
    check(not value or isinstance(value, str), f"{name} ({value}) must be a non-empty string")


def assert_object(value: Any, name: str) -> None:
    check(not value or isinstance(value, Mapping), f"{name} ({value}) must be a non-empty object")


def assert_prefix(value: Any, prefix: str, name: str) -> None:
    assert_string(value, name)
    check(value == prefix, f"{name} ({value}) must match ILP prefix: {prefix}")


def assert_account(value: Any, account: str, name: str) -> None:
    assert_string(value, name)
    check(value == account, f"{name} ({value}) must match account: {account}")


def assert_condition_or_preimage(value: Any, name: str) -> None:
    """Check the 32-byte base64url encoding of a condition or fulfillment."""
    if not value:
        return
    assert_string(value, name)
    if not CONDITION_PATTERN.fullmatch(value):
        raise InvalidFieldsError(f"{name} ({value}): Not a valid 32-byte base64url encoded string")


def parse_amount(value: Any) -> Decimal | None:
    """Parse *value* as a finite decimal, or return None.

    Floats go through ``str()`` so the checked value is the printed one,
    not its binary expansion. Booleans are never amounts.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        value = str(value)
    if not isinstance(value, (str, int, Decimal)):
        return None
    if isinstance(value, str) and not AMOUNT_PATTERN.fullmatch(value):
        return None
    try:
        number = Decimal(value)
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def is_number(value: Any) -> bool:
    return parse_amount(value) is not None


def assert_number(value: Any, name: str) -> Decimal:
    """Require a strictly positive decimal. Returns the parsed value."""
    number = parse_amount(value)
    check(number is not None, f"{name} ({value}) must be a number")
    assert number is not None
    check(number > _ZERO, f"{name} ({value}) must be positive")
    return number


def both_or_neither(a: Any, b: Any) -> bool:
    """True when *a* and *b* are both truthy or both falsy."""
    return bool(a) == bool(b)
