"""Host platform detection.

Platform and environment lookups are ambient process state. They are
captured once in a `HostEnvironment` so the rest of the code (and the
tests) can work from an explicit value instead of `sys.platform` and
`os.environ`.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class HostPlatform(str, Enum):
    """Platform families that have a known RimWorld Mods location."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    OTHER = "other"

    @classmethod
    def from_identifier(cls, raw: str) -> "HostPlatform":
        """Map a `sys.platform`-style identifier onto a platform family."""

        value = raw.strip().lower()
        if value == "win32" or value.startswith(("cygwin", "msys")):
            return cls.WINDOWS
        if value.startswith("darwin"):
            return cls.MACOS
        if value.startswith("linux"):
            return cls.LINUX
        return cls.OTHER


class HostEnvironment(BaseModel):
    model_config = ConfigDict(frozen=True)

    platform: str = Field(
        ...,
        description="Raw platform identifier (sys.platform).",
    )
    home_dir: Path = Field(
        ...,
        description="User home directory.",
    )
    app_data_dir: Path | None = Field(
        default=None,
        description="%APPDATA% (Roaming); only consulted on Windows.",
    )

    @property
    def family(self) -> HostPlatform:
        return HostPlatform.from_identifier(self.platform)

    @classmethod
    def current(cls) -> "HostEnvironment":
        """Snapshot of the running process' platform, home and APPDATA."""

        app_data = (os.environ.get("APPDATA") or "").strip()
        return cls(
            platform=sys.platform,
            home_dir=Path.home(),
            app_data_dir=Path(app_data) if app_data else None,
        )
