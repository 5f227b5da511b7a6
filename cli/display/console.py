"""Shared Rich console for terminal output."""

from rich.console import Console

console = Console()
