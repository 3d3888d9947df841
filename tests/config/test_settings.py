"""Tests for ValidationSettings loading and the env-backed repository."""

import json

import pytest
from pydantic import ValidationError

from workbook_guard.config import (
    ConfigError,
    EnvConfigRepository,
    FakeConfigRepository,
    ValidationSettings,
    load_settings,
)


class TestValidationSettings:
    def test_defaults(self):
        settings = load_settings(FakeConfigRepository())

        assert settings.null_sentinel == "NULL"
        assert settings.key_separator == "-"
        assert settings.row_number_offset == 2
        assert settings.max_file_size is None
        assert settings.sheet_name is None
        assert settings.infer_csv_types is True

    def test_env_overrides(self):
        repo = FakeConfigRepository(
            env={
                "WORKBOOK_GUARD_MAX_FILE_SIZE": "2MB",
                "WORKBOOK_GUARD_ROW_NUMBER_OFFSET": "1",
                "WORKBOOK_GUARD_INFER_CSV_TYPES": "false",
            }
        )
        settings = load_settings(repo)

        assert settings.max_file_size == 2 * 1024 * 1024
        assert settings.row_number_offset == 1
        assert settings.infer_csv_types is False

    def test_settings_mapping(self):
        repo = FakeConfigRepository(settings={"sheet_name": "Employees", "key_separator": "|"})
        settings = load_settings(repo)

        assert settings.sheet_name == "Employees"
        assert settings.key_separator == "|"

    def test_blank_sheet_name_means_first_sheet(self):
        settings = ValidationSettings(sheet_name="  ")
        assert settings.sheet_name is None

    def test_invalid_values_rejected(self):
        with pytest.raises(ValidationError):
            ValidationSettings(row_number_offset=-1)
        with pytest.raises(ValidationError):
            ValidationSettings(key_separator="")
        with pytest.raises(ValidationError):
            ValidationSettings(max_file_size="lots")


class TestEnvConfigRepository:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.delenv("WORKBOOK_GUARD_SETTINGS_FILE", raising=False)
        monkeypatch.setenv("WORKBOOK_GUARD_NULL_SENTINEL", "<none>")
        settings = load_settings(EnvConfigRepository(settings_file=None))
        assert settings.null_sentinel == "<none>"

    def test_reads_settings_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("WORKBOOK_GUARD_SETTINGS_FILE", raising=False)
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"sheet_name": "Data", "max_file_size": "1KB"}), encoding="utf-8")

        settings = load_settings(EnvConfigRepository(settings_file=path))

        assert settings.sheet_name == "Data"
        assert settings.max_file_size == 1024

    def test_settings_file_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"null_sentinel": "-"}), encoding="utf-8")
        monkeypatch.setenv("WORKBOOK_GUARD_SETTINGS_FILE", str(path))

        assert EnvConfigRepository().get_setting("null_sentinel") == "-"

    def test_unreadable_settings_file_raises(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError, match="Cannot read settings file"):
            EnvConfigRepository(settings_file=path).get_setting("anything")

    def test_non_object_settings_file_raises(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigError, match="JSON object"):
            EnvConfigRepository(settings_file=path).get_setting("anything")
