"""Contrato de escritura de mods.

Por qué Protocol:
- El pipeline no sabe si los ficheros salen de Jinja2 o de un stub de test.
- Permite sustituir el writer sin tocar el Core.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

from core.config import AppSettings
from core.domain.models import ModDescriptor, ModLayout, NuzzleEntry


@runtime_checkable
class ModWriter(Protocol):
    """Contrato mínimo para materializar un mod en disco.

    Reglas de diseño:
    - Síncrono: solo I/O local.
    - Sobrescribe ficheros existentes; no hace rollback si falla a mitad.
    """

    def __call__(
        self,
        *,
        mod: ModDescriptor,
        entries: Sequence[NuzzleEntry],
        mods_root: Path,
        settings: AppSettings,
    ) -> ModLayout:
        """Escribe About.xml y NuzzlePatches.xml y devuelve sus rutas."""

        ...
