"""Tests for the normalize command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from ilp_plugin_shared.cli import cli

LEDGER = ["--account", "a", "--prefix", "g.x."]


@pytest.mark.usefixtures("_isolated_config")
class TestNormalizeTransfer:
    def test_outgoing_quiet_prints_canonical_transfer(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [*LEDGER, "-q", "normalize", "transfer", "-", "--direction", "outgoing"],
            input=json.dumps({"id": "1", "amount": "5", "to": "b"}),
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == {
            "id": "1",
            "to": "b",
            "amount": "5",
            "from": "a",
            "ledger": "g.x.",
        }

    def test_incoming_drops_note_to_self(self, cli_runner: CliRunner) -> None:
        body = {"id": "1", "amount": "5", "to": "a", "from": "b", "noteToSelf": {"x": 1}}
        result = cli_runner.invoke(
            cli,
            [*LEDGER, "--json", "normalize", "transfer", "-", "--direction", "incoming"],
            input=json.dumps(body),
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert "noteToSelf" not in data
        assert data["ledger"] == "g.x."

    def test_rejects_condition_without_expiry(self, cli_runner: CliRunner) -> None:
        body = {
            "id": "1",
            "amount": "5",
            "to": "b",
            "executionCondition": "HS8e5Ew02XKAglyus2dh2Ohabuqmy3HDM8EXMLz22ok",
        }
        result = cli_runner.invoke(
            cli,
            [*LEDGER, "normalize", "transfer", "-", "--direction", "outgoing"],
            input=json.dumps(body),
        )
        assert result.exit_code == 1
        assert "must both be set" in result.stderr


@pytest.mark.usefixtures("_isolated_config")
class TestNormalizeMessage:
    def test_message_passes_through(self, cli_runner: CliRunner) -> None:
        body = {"to": "b", "ilp": "AQID", "custom": {"k": "v"}}
        result = cli_runner.invoke(
            cli,
            [*LEDGER, "-q", "normalize", "message", "-", "--direction", "outgoing"],
            input=json.dumps(body),
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == body
