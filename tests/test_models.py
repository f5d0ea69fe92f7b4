"""Tests for domain models and platform detection."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.domain.models import ModDescriptor, ModLayout, ModRequest, NuzzleEntry
from core.domain.platform import HostEnvironment, HostPlatform


class TestModDescriptor:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("ZooSnugglers", "zoosnugglers"),
            ("My Mod!", "mymod"),
            ("Snug.Pack-2", "snug.pack-2"),
            ("Ñandú_Mod", "andmod"),
        ],
    )
    def test_derived_id(self, name, expected):
        assert ModDescriptor(name=name).derived_id == expected

    def test_package_id(self):
        assert ModDescriptor(name="ZooSnugglers").package_id("com.yourname") == "com.yourname.zoosnugglers"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ModDescriptor(name="")


class TestNuzzleEntry:
    def test_default_interval(self):
        assert NuzzleEntry(name="Chicken").interval == 24

    def test_non_positive_interval_rejected(self):
        with pytest.raises(ValidationError):
            NuzzleEntry(name="Chicken", interval=0)

    def test_request_requires_entries(self):
        with pytest.raises(ValidationError):
            ModRequest(mod=ModDescriptor(name="M"), entries=[])


class TestModLayout:
    def test_fixed_paths(self):
        layout = ModLayout.for_mod(Path("/mods"), "MyMod")
        assert layout.mod_dir == Path("/mods/MyMod")
        assert layout.about_path == Path("/mods/MyMod/About/About.xml")
        assert layout.patches_path == Path("/mods/MyMod/Patches/NuzzlePatches.xml")


class TestHostPlatform:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("win32", HostPlatform.WINDOWS),
            ("cygwin", HostPlatform.WINDOWS),
            ("msys", HostPlatform.WINDOWS),
            ("darwin", HostPlatform.MACOS),
            ("darwin23", HostPlatform.MACOS),
            ("linux", HostPlatform.LINUX),
            ("linux-gnu", HostPlatform.LINUX),
            ("freebsd14", HostPlatform.OTHER),
            ("", HostPlatform.OTHER),
        ],
    )
    def test_from_identifier(self, raw, expected):
        assert HostPlatform.from_identifier(raw) is expected

    def test_current_reads_appdata(self, monkeypatch):
        monkeypatch.setenv("APPDATA", "/c/Users/me/AppData/Roaming")
        host = HostEnvironment.current()
        assert host.app_data_dir == Path("/c/Users/me/AppData/Roaming")

    def test_current_without_appdata(self, monkeypatch):
        monkeypatch.delenv("APPDATA", raising=False)
        assert HostEnvironment.current().app_data_dir is None


class TestModDescriptorPackageId:
    @pytest.mark.parametrize("name", ["!!!", "  ", "ÄÖÜ"])
    def test_name_without_package_id_characters_rejected(self, name):
        with pytest.raises(ValidationError, match="packageId"):
            ModDescriptor(name=name)
