"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
"""

from __future__ import annotations

from typing import Sequence

from rich.table import Table
from rich.text import Text

from core.domain.models import NuzzleEntry


def build_entries_table(entries: Sequence[NuzzleEntry]) -> Table:
    """Tabla con los animales parcheados y su intervalo, en orden de entrada."""

    table = Table(title="Nuzzle patches")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Animal", style="cyan", no_wrap=True)
    table.add_column("nuzzleMtbHours", style="green", justify="right")
    for index, entry in enumerate(entries, start=1):
        table.add_row(str(index), Text(entry.name), str(entry.interval))
    return table
