"""Exportación del mod a disco.

Por qué está en adapters:
- XML/Jinja2 y el sistema de ficheros son detalles de infraestructura.
- El Core solo conoce `ModDescriptor` y `NuzzleEntry`.

Las plantillas se autoescapan (extensión .xml), así que nombres con
`<`, `&` o `"` no rompen el XML generado.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.config import AppSettings
from core.domain.models import ModDescriptor, ModLayout, NuzzleEntry
from core.errors import ModWriteError


logger = logging.getLogger(__name__)

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_about_xml(mod: ModDescriptor, *, settings: AppSettings) -> str:
    """Renderiza About.xml (metadatos que RimWorld lee del mod)."""

    template = _get_env().get_template("About.xml")
    return template.render(
        mod=mod,
        author=settings.author,
        description=settings.description,
        package_id=mod.package_id(settings.package_id_prefix),
        supported_versions=settings.supported_versions,
    )


def render_patches_xml(entries: Sequence[NuzzleEntry]) -> str:
    """Renderiza NuzzlePatches.xml: un PatchOperationAdd por entrada, en orden."""

    template = _get_env().get_template("NuzzlePatches.xml")
    return template.render(entries=entries)


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _write_atomic(path: Path, text: str) -> None:
    # Temp file in the target directory so os.replace stays on one filesystem.
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
        # mkstemp creates 0600; give the file the mode a plain open() would.
        os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def export_mod(
    *,
    mod: ModDescriptor,
    entries: Sequence[NuzzleEntry],
    mods_root: Path,
    settings: AppSettings,
) -> ModLayout:
    """Escribe `<root>/<mod>/About/About.xml` y `Patches/NuzzlePatches.xml`.

    Diseño:
    - Ambos ficheros se renderizan completos en memoria antes de tocar disco.
    - Cada fichero se sustituye de forma atómica; si el segundo falla, el
      primero queda escrito (sin rollback).
    """

    layout = ModLayout.for_mod(mods_root, mod.name)
    rendered = [
        (layout.about_path, render_about_xml(mod, settings=settings)),
        (layout.patches_path, render_patches_xml(entries)),
    ]

    for path, text in rendered:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            _write_atomic(path, text)
        except OSError as exc:
            raise ModWriteError(path, exc.strerror or str(exc)) from exc
        logger.debug("Wrote %s (%d bytes)", path, len(text.encode("utf-8")))

    return layout
