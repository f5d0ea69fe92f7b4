import os
from pathlib import Path

import pytest

from core.config import AppSettings
from core.domain.platform import HostEnvironment


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep real NUZZLIFY_* variables and ./.env files out of the tests."""

    for name in list(os.environ):
        if name.upper().startswith("NUZZLIFY_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def linux_host(tmp_path) -> HostEnvironment:
    return HostEnvironment(platform="linux", home_dir=tmp_path / "home")


@pytest.fixture
def mods_root(tmp_path) -> Path:
    return tmp_path / "Mods"
