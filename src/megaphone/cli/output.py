"""CLI output formatting utilities."""

from __future__ import annotations

import json
import logging
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler


def display_result(result: Any, console: Console) -> None:
    """Print an API response as JSON."""
    console.print_json(data=result)


def configure_logging(verbose: bool, console: Console) -> None:
    """Send megaphone and httpx logs through rich; DEBUG when verbose."""
    handler = RichHandler(console=console, show_path=False)
    level = logging.DEBUG if verbose else logging.WARNING
    for name in ("megaphone", "httpx"):
        logger = logging.getLogger(name)
        logger.handlers = [handler]
        logger.setLevel(level)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_pairs(pairs: list[str] | None) -> dict[str, Any]:
    """Parse ``key=value`` and ``key:=json`` pairs.

    ``title=2020`` yields the string ``"2020"``. ``preCount:=2`` yields an int,
    ``draft:=true`` a bool and ``summary:=null`` None.

    Raises:
        typer.BadParameter: If a pair has no ``=``, an empty key, or a
            ``:=`` value that is not valid JSON.
    """
    result: dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, raw = pair.partition("=")
        is_json = key.endswith(":")
        if is_json:
            key = key[:-1]
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value or key:=json, got '{pair}'")
        if not is_json:
            result[key] = raw
            continue
        try:
            result[key] = json.loads(raw, parse_constant=_reject_constant)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid JSON value for '{key}': {e}") from e
    return result
