"""Tests for ViuSettings: CLI flags, env vars and TOML in one object."""

from pathlib import Path

import click
import pytest

from viu_shared.config.settings import ViuSettings


class TestViuSettingsDefaults:
    def test_all_defaults(self, isolated_cwd: Path) -> None:
        settings = ViuSettings.from_cli()
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.formatting.date_format == "DD/MM/YYYY"
        assert settings.security.password_min_score == 4
        assert settings.validation.extra_keys == "ignore"

    def test_frozen(self, settings: ViuSettings) -> None:
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, isolated_cwd: Path) -> None:
        toml = isolated_cwd / "viu.toml"
        toml.write_text('[formatting]\ndate_format = "YYYY-MM-DD"\n[security]\npassword_min_score = 3\n')
        settings = ViuSettings.from_cli()
        assert settings.config_path == toml
        assert settings.formatting.date_format == "YYYY-MM-DD"
        assert settings.security.password_min_score == 3
        assert settings.validation.extra_keys == "ignore"  # default kept

    def test_discovered_from_subdirectory(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "viu.toml").write_text('[validation]\nextra_keys = "forbid"\n')
        child = isolated_cwd / "app" / "src"
        child.mkdir(parents=True)
        settings = ViuSettings.from_cli(cwd=child)
        assert settings.validation.extra_keys == "forbid"

    def test_empty_toml_uses_defaults(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "viu.toml").write_text("")
        settings = ViuSettings.from_cli()
        assert settings.security.password_min_score == 4

    def test_explicit_config_path(self, isolated_cwd: Path) -> None:
        custom = isolated_cwd / "conf" / "custom.toml"
        custom.parent.mkdir()
        custom.write_text("[security]\npassword_min_score = 2\n")
        settings = ViuSettings.from_cli(config_path=str(custom))
        assert settings.security.password_min_score == 2
        assert settings.config_path == custom

    def test_missing_explicit_path(self, isolated_cwd: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            ViuSettings.from_cli(config_path=str(isolated_cwd / "nope.toml"))

    def test_invalid_toml(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "viu.toml").write_text("[security\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ViuSettings.from_cli()

    def test_out_of_range_value_rejected(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "viu.toml").write_text("[security]\npassword_min_score = 9\n")
        with pytest.raises(Exception):
            ViuSettings.from_cli()


class TestPriority:
    def test_cli_flags_override(self, isolated_cwd: Path) -> None:
        settings = ViuSettings.from_cli(json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_env_overrides_toml(self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (isolated_cwd / "viu.toml").write_text("[security]\npassword_min_score = 3\n")
        monkeypatch.setenv("VIU_SECURITY__PASSWORD_MIN_SCORE", "5")
        settings = ViuSettings.from_cli()
        assert settings.security.password_min_score == 5

    def test_cli_overrides_env(self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VIU_JSON_OUTPUT", "false")
        settings = ViuSettings.from_cli(json_output=True)
        assert settings.json_output is True

    def test_config_env_var(self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = isolated_cwd / "elsewhere.toml"
        custom.write_text('[formatting]\ndate_format = "MM/DD/YYYY"\n')
        monkeypatch.setenv("VIU_CONFIG", str(custom))
        assert ViuSettings.from_cli().formatting.date_format == "MM/DD/YYYY"
