"""Typed, validated configuration layer for workbook-guard.

Settings are read from ``WORKBOOK_GUARD_*`` environment variables, then a
JSON settings file, then field defaults, and validated with pydantic.
"""

from ._app_config import AppConfig
from ._casters import parse_file_size
from ._registry import get_repository, set_repository
from ._repository import ConfigRepository, EnvConfigRepository, FakeConfigRepository
from ._settings import ValidationSettings, load_settings
from ._testing import override_config
from ._types import ConfigError

__all__ = [
    "ConfigError",
    # Typed groups
    "AppConfig",
    "ValidationSettings",
    "load_settings",
    # Helpers
    "parse_file_size",
    # Sources
    "ConfigRepository",
    "EnvConfigRepository",
    "get_repository",
    "set_repository",
    # Testing
    "override_config",
    "FakeConfigRepository",
]
