"""Mod generation orchestration.

The CLI delegates the whole parse → resolve → write sequence to
`generate_mod`, so printing stays in the CLI layer and the pipeline can be
driven directly from tests with an explicit host and settings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from adapters.mod_exporter import export_mod
from core.arguments import parse_arguments
from core.config import AppSettings
from core.domain.models import ModDescriptor, ModLayout, ModRequest, NuzzleEntry
from core.domain.platform import HostEnvironment
from core.interfaces.mod_writer import ModWriter
from core.mods_dir import resolve_mods_dir


logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """What a successful run produced."""

    mod: ModDescriptor
    mods_root: Path
    layout: ModLayout
    entries: list[NuzzleEntry] = field(default_factory=list)

    @property
    def mod_dir(self) -> Path:
        return self.layout.mod_dir


def resolve_mods_root(*, host: HostEnvironment, settings: AppSettings) -> Path:
    """Configured Mods folder if any, else the platform default."""

    if settings.mods_dir is not None:
        return settings.mods_dir
    return resolve_mods_dir(host)


def prepare_request(tokens: Sequence[str], *, settings: AppSettings) -> ModRequest:
    request = parse_arguments(tokens, default_interval=settings.default_interval_hours)
    for entry in request.entries:
        logger.debug("Entry %s -> nuzzleMtbHours=%d", entry.name, entry.interval)
    return request


def generate_mod(
    tokens: Sequence[str],
    *,
    host: HostEnvironment,
    settings: AppSettings,
    writer: ModWriter | None = None,
    on_resolved: Callable[[Path], None] | None = None,
) -> GenerationResult:
    """Parse `tokens`, locate the Mods folder and write both mod files.

    `on_resolved` receives the mod folder right before anything is written.
    Any failure raises a `NuzzlifyError` subclass; nothing is written when
    parsing or path resolution fails.
    """

    request = prepare_request(tokens, settings=settings)
    mods_root = resolve_mods_root(host=host, settings=settings)
    logger.debug("Mods folder: %s", mods_root)
    if on_resolved is not None:
        on_resolved(mods_root / request.mod.name)
    return write_request(request, mods_root=mods_root, settings=settings, writer=writer)


def write_request(
    request: ModRequest,
    *,
    mods_root: Path,
    settings: AppSettings,
    writer: ModWriter | None = None,
) -> GenerationResult:
    writer = writer or export_mod
    logger.info("Generating mod %r with %d entries in %s", request.mod.name, len(request.entries), mods_root)
    layout = writer(
        mod=request.mod,
        entries=request.entries,
        mods_root=mods_root,
        settings=settings,
    )
    logger.info("Mod %r written to %s", request.mod.name, layout.mod_dir)
    return GenerationResult(
        mod=request.mod,
        mods_root=mods_root,
        layout=layout,
        entries=list(request.entries),
    )
