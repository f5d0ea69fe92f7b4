"""Logging configuration for the CLI (stdlib logging + Rich)."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def _resolve_level(level: str | int | None, verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    if isinstance(level, int):
        return level
    if level:
        resolved = logging.getLevelName(level.strip().upper())
        if isinstance(resolved, int):
            return resolved
    return logging.WARNING


def configure_logging(level: str | int | None = None, *, verbose: bool = False) -> None:
    """Send log records to stderr through a RichHandler.

    Replaces handlers from a previous call so repeated invocations (tests,
    CliRunner) do not duplicate output.
    """

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if isinstance(existing, RichHandler):
            root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(_resolve_level(level, verbose))
