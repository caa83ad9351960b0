"""Command-line browser for GitHub repositories."""

from .cli import cli, main

__all__ = ["cli", "main"]
