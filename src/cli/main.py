"""Nuzzlify CLI.

Generates a RimWorld mod that adds `nuzzleMtbHours` to animal races:

    nuzzlify ZooSnugglers Muffalo:12 Elephant:36 Chicken

writes `<Mods>/ZooSnugglers/About/About.xml` and
`<Mods>/ZooSnugglers/Patches/NuzzlePatches.xml`.
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cli.logging_setup import configure_logging
from cli.ui_components import build_entries_table
from core.config import AppSettings
from core.domain.platform import HostEnvironment
from core.errors import NuzzlifyError, UsageError
from core.services.mod_pipeline import generate_mod

USAGE = "Usage: nuzzlify <ModName> <Animal[:Hours]> [Animal2[:Hours] ...]"

app = typer.Typer(
    add_completion=False,
    help="Generate a RimWorld mod that makes animals nuzzle, with per-animal intervals.",
)

_console = Console(soft_wrap=True)
_err_console = Console(stderr=True, soft_wrap=True)


def _fail(exc: NuzzlifyError) -> typer.Exit:
    if isinstance(exc, UsageError):
        _err_console.print(USAGE, markup=False, highlight=False)
    else:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
    return typer.Exit(code=exc.exit_code)


def _announce_destination(mod_dir: Path) -> None:
    _console.print(f"Writing mod to: {mod_dir}", markup=False, highlight=False)


@app.command()
def generate(
    mod_name: str = typer.Argument(
        "",
        metavar="MOD_NAME",
        help="Mod folder name and <name> in About.xml.",
        show_default=False,
    ),
    entries: list[str] | None = typer.Argument(
        None,
        metavar="ANIMAL[:HOURS]...",
        help="Animal defNames, optionally with a nuzzle interval in hours (default 24).",
        show_default=False,
    ),
    mods_dir: Path | None = typer.Option(
        None,
        "--mods-dir",
        help="Write into this Mods folder instead of the detected one.",
        file_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr."),
) -> None:
    """Create About/About.xml and Patches/NuzzlePatches.xml for MOD_NAME."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc

    configure_logging(settings.log_level, verbose=verbose)
    if mods_dir is not None:
        settings = settings.model_copy(update={"mods_dir": mods_dir})

    tokens = [mod_name, *(entries or [])]
    try:
        result = generate_mod(
            tokens,
            host=HostEnvironment.current(),
            settings=settings,
            on_resolved=_announce_destination,
        )
    except NuzzlifyError as exc:
        raise _fail(exc) from exc

    _console.print(build_entries_table(result.entries))
    _console.print(
        f"[green]Mod '{escape(result.mod.name)}' successfully created in your RimWorld Mods folder![/green]",
        highlight=False,
    )


def run() -> None:
    app()


if __name__ == "__main__":
    run()
