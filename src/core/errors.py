"""Error taxonomy for mod generation.

Why here:
- Lower layers raise these and never print; only the CLI maps them to
  exit codes and messages.
- Every failure is terminal: fix the input and run again.
"""

from __future__ import annotations

from pathlib import Path


class NuzzlifyError(Exception):
    """Base class for every failure the CLI knows how to report."""

    exit_code: int = 1


class UsageError(NuzzlifyError):
    """Command line did not carry a mod name and at least one entry."""


class MissingTargetError(UsageError):
    def __init__(self) -> None:
        super().__init__("a mod name is required")


class NoEntriesError(UsageError):
    def __init__(self) -> None:
        super().__init__("at least one Animal[:Hours] entry is required")


class InvalidTargetError(NuzzlifyError):
    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"invalid mod name {name!r}: {reason}")


class InvalidEntryError(NuzzlifyError):
    def __init__(self, token: str, reason: str = "the name before ':' must not be empty") -> None:
        self.token = token
        super().__init__(f"invalid entry {token!r}: {reason}")


class InvalidIntervalError(NuzzlifyError):
    def __init__(self, token: str, value: str) -> None:
        self.token = token
        self.value = value
        super().__init__(
            f"invalid interval {value!r} in entry {token!r}: expected a positive whole number of hours"
        )


class UnsupportedPlatformError(NuzzlifyError):
    def __init__(self, platform: str) -> None:
        self.platform = platform
        super().__init__(f"Unsupported OS: {platform}")


class MissingAppDataError(NuzzlifyError):
    def __init__(self) -> None:
        super().__init__("APPDATA is not set; cannot locate the RimWorld Mods folder")


class ModWriteError(NuzzlifyError):
    """Directory creation or file write failed; already written files are kept."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"could not write {path}: {reason}")
