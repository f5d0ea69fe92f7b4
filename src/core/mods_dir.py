"""Default RimWorld Mods folder per platform.

These locations must match where the game itself looks for local mods.
"""

from __future__ import annotations

import re
from pathlib import Path, PureWindowsPath

from core.domain.platform import HostEnvironment, HostPlatform
from core.errors import MissingAppDataError, UnsupportedPlatformError

_WINDOWS_STYLE = re.compile(r"^[A-Za-z]:|\\")

_LOCALLOW_MODS = ("LocalLow", "Ludeon Studios", "RimWorld by Ludeon Studios", "Mods")


def _windows_mods_dir(app_data_dir: Path) -> Path:
    # %APPDATA% is ...\AppData\Roaming; the game lives under its LocalLow sibling.
    # Under cygwin/msys Path is POSIX but APPDATA may still be C:\..., which
    # PosixPath would treat as a single component.
    raw = str(app_data_dir)
    if _WINDOWS_STYLE.search(raw):
        return Path(str(PureWindowsPath(raw).parent.joinpath(*_LOCALLOW_MODS)))
    return app_data_dir.parent.joinpath(*_LOCALLOW_MODS)


def resolve_mods_dir(host: HostEnvironment) -> Path:
    """Return the Mods folder for `host`.

    Pure: everything it needs comes from `host`.
    """

    family = host.family
    if family is HostPlatform.WINDOWS:
        if host.app_data_dir is None:
            raise MissingAppDataError()
        return _windows_mods_dir(host.app_data_dir)
    if family is HostPlatform.MACOS:
        return host.home_dir / "Library" / "Application Support" / "RimWorld" / "Mods"
    if family is HostPlatform.LINUX:
        return host.home_dir / ".config" / "unity3d" / "Ludeon Studios" / "RimWorld" / "Mods"
    raise UnsupportedPlatformError(host.platform)
