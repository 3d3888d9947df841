"""Typed config groups using Pydantic BaseModel.

Subclass ``AppConfig`` and declare fields + a ``Meta`` inner class to map
config keys automatically::

    class LimitsConfig(AppConfig):
        class Meta:
            prefix = "limits"
            env_prefix = "WORKBOOK_GUARD_LIMITS"

        max_rows: int = 10_000

    cfg = LimitsConfig.load()
    cfg.max_rows    # read from WORKBOOK_GUARD_LIMITS_MAX_ROWS env / limits_max_rows setting
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from ._registry import _auto_repository
from ._repository import ConfigRepository


class AppConfig(BaseModel):
    """Base class for declarative, typed config groups."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    class Meta:
        prefix: str = ""
        env_prefix: str = ""

    @classmethod
    def load(cls, repo: ConfigRepository | None = None) -> "AppConfig":
        """Load config values and return a validated instance.

        Resolution per field:
        1. Environment variable (``{ENV_PREFIX}_{FIELD_NAME}`` uppercased)
        2. Settings key (``{prefix}_{field}``)
        3. Omit: let Pydantic use the field default or raise ``ValidationError``
        """
        active_repo = repo or _auto_repository()

        meta = cls.Meta
        prefix = getattr(meta, "prefix", "")
        env_prefix = getattr(meta, "env_prefix", "")
        raw_data: dict[str, Any] = {}

        for field_name in cls.model_fields:
            if env_prefix:
                env_val = active_repo.get_env(f"{env_prefix}_{field_name}".upper())
                if env_val is not None:
                    raw_data[field_name] = env_val
                    continue

            config_key = f"{prefix}_{field_name}" if prefix else field_name
            setting_val = active_repo.get_setting(config_key)
            if setting_val is not None:
                raw_data[field_name] = setting_val

        return cls.model_validate(raw_data)
