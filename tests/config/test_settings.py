"""Tests for PluginSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from ilp_plugin_shared.config.settings import PluginSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ILP_PLUGIN_CONFIG",
        "ILP_PLUGIN_QUIET",
        "ILP_PLUGIN_LEDGER__ACCOUNT",
        "ILP_PLUGIN_LEDGER__PREFIX",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = PluginSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.ledger.account == ""
        assert settings.ledger.prefix == ""
        assert settings.plugins.load_entry_points is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = PluginSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_ledger_section(self, tmp_path: Path) -> None:
        (tmp_path / "ilp-plugin.toml").write_text(
            '[ledger]\naccount = "g.x.alice"\nprefix = "g.x."\ncurrency_scale = 9\n'
        )
        settings = PluginSettings.from_cli(start=tmp_path)
        assert settings.ledger.account == "g.x.alice"
        assert settings.ledger.prefix == "g.x."
        assert settings.ledger.currency_scale == 9
        assert settings.config_path == tmp_path / "ilp-plugin.toml"

    def test_walks_up_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "ilp-plugin.toml").write_text('[ledger]\nprefix = "g.x."\n')
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        settings = PluginSettings.from_cli(start=deep)
        assert settings.ledger.prefix == "g.x."

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text('[ledger]\nprefix = "g.custom."\n')
        settings = PluginSettings.from_cli(config_path=str(custom))
        assert settings.ledger.prefix == "g.custom."

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "ilp-plugin.toml").write_text("[ledger\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            PluginSettings.from_cli(start=tmp_path)


class TestOverrides:
    def test_account_override_keeps_toml_prefix(self, tmp_path: Path) -> None:
        (tmp_path / "ilp-plugin.toml").write_text(
            '[ledger]\naccount = "g.x.alice"\nprefix = "g.x."\n'
        )
        settings = PluginSettings.from_cli(start=tmp_path, account="g.x.bob")
        assert settings.ledger.account == "g.x.bob"
        assert settings.ledger.prefix == "g.x."

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = PluginSettings.from_cli(start=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ILP_PLUGIN_QUIET", "true")
        settings = PluginSettings.from_cli(start=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_beats_toml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "ilp-plugin.toml").write_text('[ledger]\nprefix = "g.x."\n')
        monkeypatch.setenv("ILP_PLUGIN_LEDGER__PREFIX", "g.env.")
        settings = PluginSettings.from_cli(start=tmp_path)
        assert settings.ledger.prefix == "g.env."
