"""Small helpers shared by ledger plugins."""

from __future__ import annotations

import base64
import logging
from typing import Any

import pluggy

logger = logging.getLogger(__name__)


def safe_emit(hook: pluggy.HookRelay, event: str, **payload: Any) -> list[Any]:
    """Call the *event* hook without letting a handler's failure escape.

    A listener that raises must not interrupt the caller (for instance a
    balance update that already happened). Unknown events are a no-op.

    INVARIANT: Plugin failures are logged, never raised.
    """
    hook_fn = getattr(hook, event, None)
    if hook_fn is None:
        return []
    try:
        return list(hook_fn(**payload))
    except Exception:
        logger.error("error in handler for event %s", event, exc_info=True)
        return []


def base64url(data: bytes) -> str:
    """Unpadded base64url encoding, as used for conditions and fulfillments."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
