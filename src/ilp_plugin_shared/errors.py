"""Error taxonomy shared by ledger plugins.

Peers serialize errors by class name, so every error exposes ``name``.
"""

from __future__ import annotations


class PluginError(Exception):
    """Base class for errors raised by ilp_plugin_shared."""

    @property
    def name(self) -> str:
        return type(self).__name__


class InvalidFieldsError(PluginError):
    """A transfer, message or fulfillment failed field validation."""
