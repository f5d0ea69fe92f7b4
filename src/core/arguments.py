"""Parsing of `<ModName> <Animal[:Hours]> ...` command-line tokens."""

from __future__ import annotations

from typing import Sequence

from pydantic import ValidationError

from core.domain.models import DEFAULT_INTERVAL_HOURS, ModDescriptor, ModRequest, NuzzleEntry
from core.errors import (
    InvalidEntryError,
    InvalidIntervalError,
    InvalidTargetError,
    MissingTargetError,
    NoEntriesError,
)


def _first_error(exc: ValidationError) -> str:
    # e.g. undecodable bytes in argv arrive as lone surrogates and fail str validation
    errors = exc.errors()
    return errors[0]["msg"] if errors else str(exc)


def parse_interval(token: str, value: str) -> int:
    # ASCII digits only: int() would also accept '+12', ' 12' or '١٢'.
    if not (value.isascii() and value.isdigit()):
        raise InvalidIntervalError(token, value)
    hours = int(value)
    if hours <= 0:
        raise InvalidIntervalError(token, value)
    return hours


def parse_entry(token: str, default_interval: int = DEFAULT_INTERVAL_HOURS) -> NuzzleEntry:
    """Parse one `name` or `name:hours` token.

    Only the first ':' splits; an empty or missing hours part means
    `default_interval`.
    """

    name, _, value = token.partition(":")
    if not name:
        raise InvalidEntryError(token)
    interval = parse_interval(token, value) if value else default_interval
    try:
        return NuzzleEntry(name=name, interval=interval)
    except ValidationError as exc:
        raise InvalidEntryError(token, _first_error(exc)) from exc


def parse_arguments(
    tokens: Sequence[str],
    default_interval: int = DEFAULT_INTERVAL_HOURS,
) -> ModRequest:
    """Split raw CLI tokens into the mod and its ordered entries."""

    if not tokens or not tokens[0]:
        raise MissingTargetError()
    target, *raw_entries = tokens
    if not raw_entries:
        raise NoEntriesError()

    try:
        mod = ModDescriptor(name=target)
    except ValidationError as exc:
        raise InvalidTargetError(target, _first_error(exc)) from exc

    entries = [parse_entry(token, default_interval) for token in raw_entries]
    return ModRequest(mod=mod, entries=entries)
