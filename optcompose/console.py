# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Optcompose applications."""
from rich.console import Console

console = Console()
err_console = Console(stderr=True)
