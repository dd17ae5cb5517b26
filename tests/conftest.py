"""Shared pytest fixtures for fnkit tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest

from fnkit.config.settings import reset_settings


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run each test with no FNKIT_* env vars and no discoverable fnkit.toml.

    Pinning FNKIT_CONFIG to a missing file disables walk-up discovery, so a
    stray config above the checkout cannot leak into settings.
    """
    for name in list(os.environ):
        if name.startswith("FNKIT_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("FNKIT_CONFIG", str(tmp_path / "absent.toml"))
    reset_settings()
    yield
    reset_settings()
