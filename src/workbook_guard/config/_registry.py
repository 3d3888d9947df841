"""Module-level config repository used by ``AppConfig.load()``.

``set_repository()`` installs a source for the whole process (tests swap in
a ``FakeConfigRepository`` through ``override_config``); when none is set
an ``EnvConfigRepository`` is created on first use.
"""

from __future__ import annotations

from ._repository import ConfigRepository, EnvConfigRepository

_active_repository: ConfigRepository | None = None


def set_repository(repo: ConfigRepository | None) -> None:
    """Set the module-level config repository."""
    global _active_repository
    _active_repository = repo


def get_repository() -> ConfigRepository | None:
    """Return the current module-level config repository (may be ``None``)."""
    return _active_repository


def _auto_repository() -> ConfigRepository:
    """Lazily create an ``EnvConfigRepository`` if none is set."""
    global _active_repository
    if _active_repository is None:
        _active_repository = EnvConfigRepository()
    return _active_repository
