"""Tests for MedformSettings: unified settings with a TOML source."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from medform.config.settings import MedformSettings


@pytest.mark.usefixtures("_isolated_config")
class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = MedformSettings.from_cli(start_dir=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.validation.timezone == "UTC"
        assert settings.validation.today is None
        assert settings.output.width == 100

    def test_frozen(self, tmp_path: Path) -> None:
        settings = MedformSettings.from_cli(start_dir=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


@pytest.mark.usefixtures("_isolated_config")
class TestTomlSource:
    def test_loads_medform_toml(self, tmp_path: Path) -> None:
        (tmp_path / "medform.toml").write_text(
            '[validation]\ntimezone = "Asia/Kolkata"\n[output]\nwidth = 80\n'
        )
        settings = MedformSettings.from_cli(start_dir=tmp_path)
        assert settings.validation.timezone == "Asia/Kolkata"
        assert settings.output.width == 80
        assert settings.config_path == (tmp_path / "medform.toml").resolve()

    def test_loads_pyproject_tool_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "clinic"\n[tool.medform.validation]\ntoday = 2026-01-02\n'
        )
        settings = MedformSettings.from_cli(start_dir=tmp_path)
        assert settings.validation.today == date(2026, 1, 2)

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "medform.toml").write_text("")
        settings = MedformSettings.from_cli(start_dir=tmp_path)
        assert settings.output.width == 100

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "rules.toml"
        custom.parent.mkdir()
        custom.write_text("[output]\nwidth = 60\n")
        settings = MedformSettings.from_cli(config_path=str(custom), start_dir=tmp_path)
        assert settings.output.width == 60
        assert settings.config_path == custom


@pytest.mark.usefixtures("_isolated_config")
class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "medform.toml").write_text('[validation]\ntimezone = "Asia/Kolkata"\n')
        monkeypatch.setenv("MEDFORM_VALIDATION__TIMEZONE", "Europe/London")
        settings = MedformSettings.from_cli(start_dir=tmp_path)
        assert settings.validation.timezone == "Europe/London"

    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = MedformSettings.from_cli(
            start_dir=tmp_path, json_output=True, quiet=True, verbose=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_init_kwargs_override_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MEDFORM_VALIDATION__TODAY", "2026-01-01")
        settings = MedformSettings.from_cli(
            start_dir=tmp_path, validation={"today": date(2026, 6, 1)}
        )
        assert settings.validation.today == date(2026, 6, 1)


@pytest.mark.usefixtures("_isolated_config")
class TestToday:
    def test_pinned(self, settings: MedformSettings, today: date) -> None:
        assert settings.today() == today

    def test_pinned_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MEDFORM_VALIDATION__TODAY", "2026-02-28")
        assert MedformSettings.from_cli(start_dir=tmp_path).today() == date(2026, 2, 28)

    def test_follows_timezone(self, tmp_path: Path) -> None:
        settings = MedformSettings.from_cli(
            start_dir=tmp_path, validation={"timezone": "Pacific/Kiritimati"}
        )
        before = datetime.now(ZoneInfo("Pacific/Kiritimati")).date()
        result = settings.today()
        after = datetime.now(ZoneInfo("Pacific/Kiritimati")).date()
        assert before <= result <= after
