"""Tests for config file discovery."""

from pathlib import Path

import pytest

from ilp_plugin_shared.config.discovery import CONFIG_ENV_VAR, find_config, load_config


class TestFindConfig:
    def test_not_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert find_config(tmp_path) is None

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = tmp_path / "elsewhere.toml"
        target.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(target))
        assert find_config(tmp_path) == target

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        config = load_config(cwd=tmp_path)
        assert config.ledger.prefix == ""

    def test_sparse_file(self, tmp_path: Path) -> None:
        path = tmp_path / "ilp-plugin.toml"
        path.write_text('[ledger]\nprefix = "g.x."\n')
        config = load_config(path)
        assert config.ledger.prefix == "g.x."
        assert config.ledger.account == ""
        assert config.plugins.load_entry_points is True
