"""ilp-plugin-shared — validation and normalization for ledger plugins.

Public surface mirrors what ledger plugins import: the validator, its
error type, and the small event/encoding helpers.
"""

from __future__ import annotations

from ilp_plugin_shared.errors import InvalidFieldsError, PluginError
from ilp_plugin_shared.util import base64url, safe_emit
from ilp_plugin_shared.validator import Validator

__version__ = "1.0.0"

__all__ = [
    "InvalidFieldsError",
    "PluginError",
    "Validator",
    "__version__",
    "base64url",
    "safe_emit",
]
