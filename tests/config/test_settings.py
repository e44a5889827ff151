"""Tests for FoldkitSettings — layered settings with a TOML source."""

from pathlib import Path

import click
import pytest

from foldkit.config.settings import FoldkitSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = FoldkitSettings.from_cli(start_dir=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.input.element_type == "int"
        assert settings.output.style == "list"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = FoldkitSettings.from_cli(start_dir=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "foldkit.toml").write_text('[input]\nelement_type = "str"\n')
        settings = FoldkitSettings.from_cli(start_dir=tmp_path)
        assert settings.input.element_type == "str"
        assert settings.output.style == "list"

    def test_sparse_override(self, tmp_path: Path) -> None:
        (tmp_path / "foldkit.toml").write_text("[input]\nmax_length = 3\n")
        settings = FoldkitSettings.from_cli(start_dir=tmp_path)
        assert settings.input.max_length == 3
        assert settings.input.element_type == "int"

    def test_records_config_path(self, tmp_path: Path) -> None:
        toml = tmp_path / "foldkit.toml"
        toml.write_text("")
        settings = FoldkitSettings.from_cli(start_dir=tmp_path)
        assert settings.config_path == toml.resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text('[output]\nstyle = "repr"\n')
        settings = FoldkitSettings.from_cli(config_path=str(custom))
        assert settings.output.style == "repr"

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "foldkit.toml").write_text("[input\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            FoldkitSettings.from_cli(start_dir=tmp_path)


class TestPriority:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "foldkit.toml").write_text('[output]\nstyle = "list"\n')
        monkeypatch.setenv("FOLDKIT_OUTPUT__STYLE", "repr")
        settings = FoldkitSettings.from_cli(start_dir=tmp_path)
        assert settings.output.style == "repr"

    def test_cli_flag_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FOLDKIT_INPUT__ELEMENT_TYPE", "float")
        settings = FoldkitSettings.from_cli(start_dir=tmp_path, element_type="str")
        assert settings.input.element_type == "str"

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = FoldkitSettings.from_cli(start_dir=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True
