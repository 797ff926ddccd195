"""CLI for megaphone."""

from megaphone.cli.main import app

__all__ = ["app"]
