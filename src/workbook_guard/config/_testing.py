"""Test utilities for the config module."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from ._registry import get_repository, set_repository
from ._repository import FakeConfigRepository


@contextmanager
def override_config(
    *,
    settings: dict[str, Any] | None = None,
    env: dict[str, str] | None = None,
) -> Iterator[FakeConfigRepository]:
    """Temporarily replace the config source with a ``FakeConfigRepository``.

    Usage::

        with override_config(settings={"key_separator": "|"}) as repo:
            assert ValidationSettings.load().key_separator == "|"
            repo.set_setting("null_sentinel", "<none>")
    """
    previous = get_repository()
    fake = FakeConfigRepository(env=env, settings=settings)
    set_repository(fake)
    try:
        yield fake
    finally:
        set_repository(previous)
