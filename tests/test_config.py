"""Tests for settings, logging setup and the entries table."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

import core.config as config
from cli.logging_setup import configure_logging
from cli.ui_components import build_entries_table
from core.config import AppSettings
from core.domain.models import NuzzleEntry


class TestAppSettings:
    def test_defaults_match_fixed_template(self, settings):
        assert settings.mods_dir is None
        assert settings.author == "YourName"
        assert settings.package_id_prefix == "com.yourname"
        assert settings.supported_versions == ["1.5"]
        assert settings.default_interval_hours == 24

    def test_env_prefix(self, monkeypatch, tmp_path):
        monkeypatch.setenv("NUZZLIFY_AUTHOR", "Pawprint")
        monkeypatch.setenv("NUZZLIFY_MODS_DIR", str(tmp_path))
        monkeypatch.setenv("NUZZLIFY_SUPPORTED_VERSIONS", '["1.4", "1.5"]')
        settings = AppSettings(_env_file=None)
        assert settings.author == "Pawprint"
        assert settings.mods_dir == tmp_path
        assert settings.supported_versions == ["1.4", "1.5"]

    def test_dotenv_in_working_directory(self, tmp_path):
        (tmp_path / ".env").write_text("NUZZLIFY_DEFAULT_INTERVAL_HOURS=12\n", encoding="utf-8")
        assert AppSettings().default_interval_hours == 12

    def test_non_positive_default_interval_rejected(self, monkeypatch):
        monkeypatch.setenv("NUZZLIFY_DEFAULT_INTERVAL_HOURS", "0")
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)


class TestUserConfigDir:
    def test_xdg_config_home(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config.sys, "platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert config.get_user_config_dir() == tmp_path / "nuzzlify"

    def test_linux_fallback(self, monkeypatch):
        monkeypatch.setattr(config.sys, "platform", "linux")
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert config.get_user_config_dir() == Path.home() / ".config" / "nuzzlify"

    def test_env_file_inside_config_dir(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config.sys, "platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert config.get_user_env_file() == tmp_path / "nuzzlify" / ".env"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore_root_logger(self):
        root = logging.getLogger()
        level, handlers = root.level, list(root.handlers)
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_verbose_forces_debug(self):
        configure_logging("ERROR", verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_level_name(self):
        configure_logging("info")
        assert logging.getLogger().level == logging.INFO

    def test_unknown_level_falls_back_to_warning(self):
        configure_logging("chatty")
        assert logging.getLogger().level == logging.WARNING

    def test_repeated_calls_keep_one_rich_handler(self):
        configure_logging()
        configure_logging()
        handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1


def test_entries_table_lists_entries_in_order():
    table = build_entries_table([NuzzleEntry(name="Muffalo", interval=12), NuzzleEntry(name="[Chicken]")])
    console = Console(record=True, width=80)
    console.print(table)
    text = console.export_text()
    assert table.row_count == 2
    assert text.index("Muffalo") < text.index("[Chicken]")
