"""Shared Rich console instance for consistent terminal output."""

from rich.console import Console

# Shared console instance used by the renderer, the prompts and the menu
console = Console()
