"""Config source protocol plus the environment-backed and in-memory implementations."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping, Protocol, runtime_checkable

from ._types import ConfigError

SETTINGS_FILE_ENV = "WORKBOOK_GUARD_SETTINGS_FILE"


@runtime_checkable
class ConfigRepository(Protocol):
    """Abstraction over where config values come from.

    Implementations provide two lookups: process environment variables and
    a flat or nested settings mapping.
    """

    def get_env(self, key: str) -> str | None:
        ...

    def get_setting(self, key: str) -> Any:
        ...


class EnvConfigRepository:
    """Reads config from ``os.environ`` and an optional JSON settings file.

    The settings file path comes from the constructor or, when omitted,
    from the ``WORKBOOK_GUARD_SETTINGS_FILE`` environment variable. The
    file is read once, on first lookup.
    """

    def __init__(self, settings_file: str | Path | None = None) -> None:
        self._settings_file = settings_file
        self._settings: dict[str, Any] | None = None

    def get_env(self, key: str) -> str | None:
        return os.environ.get(key)

    def get_setting(self, key: str) -> Any:
        return self._load_settings().get(key)

    def _load_settings(self) -> dict[str, Any]:
        if self._settings is not None:
            return self._settings

        path = self._settings_file or os.environ.get(SETTINGS_FILE_ENV)
        if not path:
            self._settings = {}
            return self._settings

        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigError(f"Cannot read settings file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a JSON object")

        self._settings = data
        return self._settings


class FakeConfigRepository:
    """Dict-backed config repository for tests.

    >>> repo = FakeConfigRepository(env={"DEBUG": "1"}, settings={"sheet_name": "Staff"})
    >>> repo.get_env("DEBUG")
    '1'
    """

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        settings: Mapping[str, Any] | None = None,
    ) -> None:
        self._env: dict[str, str] = dict(env or {})
        self._settings: dict[str, Any] = dict(settings or {})

    # -- Protocol methods ---------------------------------------------------

    def get_env(self, key: str) -> str | None:
        return self._env.get(key)

    def get_setting(self, key: str) -> Any:
        return self._settings.get(key)

    # -- Mutation helpers for test setup ------------------------------------

    def set_env(self, key: str, value: str) -> None:
        self._env[key] = value

    def set_setting(self, key: str, value: Any) -> None:
        self._settings[key] = value
