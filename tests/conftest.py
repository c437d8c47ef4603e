"""Shared pytest fixtures for ilp_plugin_shared tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from ilp_plugin_shared.context import LedgerInfo, StaticPluginContext
from ilp_plugin_shared.validator import Validator

ACCOUNT = "a"
PREFIX = "g.x."
CONDITION = "HS8e5Ew02XKAglyus2dh2Ohabuqmy3HDM8EXMLz22ok"
FULFILLMENT = "cz4FEOTTzBQ9vBr2rXJVHXaWu_Tow3OZT-V0FBhJvA8"
EXPIRES_AT = "2026-10-19T12:00:00.000Z"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def plugin() -> StaticPluginContext:
    """Plugin context for local account ``a`` on ledger ``g.x.``."""
    return StaticPluginContext(ACCOUNT, LedgerInfo(prefix=PREFIX))


@pytest.fixture
def validator(plugin: StaticPluginContext) -> Validator:
    return Validator(plugin=plugin)


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp directory with no config file or env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command test
    classes.
    """
    for name in ("ILP_PLUGIN_CONFIG", "ILP_PLUGIN_LEDGER__ACCOUNT", "ILP_PLUGIN_LEDGER__PREFIX"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
