"""Tests for foldkit.toml walk-up discovery."""

from pathlib import Path

import pytest

from foldkit.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        toml = tmp_path / CONFIG_FILENAME
        toml.write_text("")
        assert find_config(tmp_path) == toml.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        toml = tmp_path / CONFIG_FILENAME
        toml.write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == toml.resolve()

    def test_none_when_missing(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        other = tmp_path / "elsewhere.toml"
        other.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None
