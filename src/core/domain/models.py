"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en el borde (CLI) sin acoplar el Core a I/O.
- Los modelos describen *qué* se genera (mod, entradas), no *cómo* se escribe.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


DEFAULT_INTERVAL_HOURS = 24

_PACKAGE_ID_STRIP = re.compile(r"[^a-z0-9.\-]")


class NuzzleEntry(BaseModel):
    """One animal to patch with a nuzzle interval.

    The name is taken verbatim (any non-empty text); escaping is the
    renderer's job.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="defName of the ThingDef to patch (e.g. 'Muffalo').",
    )
    interval: int = Field(
        default=DEFAULT_INTERVAL_HOURS,
        gt=0,
        description="Mean time between nuzzles, in in-game hours.",
    )


class ModDescriptor(BaseModel):
    """The mod being generated; maps to one folder under Mods/."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Mod name, used verbatim as folder name and <name>.",
    )

    @field_validator("name")
    @classmethod
    def _needs_package_id_characters(cls, value: str) -> str:
        # RimWorld rejects a packageId ending in a bare ".".
        if value and not _PACKAGE_ID_STRIP.sub("", value.lower()):
            raise ValueError("must contain at least one letter, digit, '.' or '-' to form a packageId")
        return value

    @property
    def derived_id(self) -> str:
        """Lower-cased name with everything outside [a-z0-9.-] removed."""

        return _PACKAGE_ID_STRIP.sub("", self.name.lower())

    def package_id(self, prefix: str) -> str:
        return f"{prefix}.{self.derived_id}"


class ModRequest(BaseModel):
    """Parsed command line: the mod plus its ordered entries."""

    mod: ModDescriptor
    entries: list[NuzzleEntry] = Field(..., min_length=1)


@dataclass(frozen=True)
class ModLayout:
    """Fixed on-disk layout of a generated mod."""

    mod_dir: Path
    about_path: Path
    patches_path: Path

    @classmethod
    def for_mod(cls, mods_root: Path, mod_name: str) -> "ModLayout":
        mod_dir = mods_root / mod_name
        return cls(
            mod_dir=mod_dir,
            about_path=mod_dir / "About" / "About.xml",
            patches_path=mod_dir / "Patches" / "NuzzlePatches.xml",
        )
