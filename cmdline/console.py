# Cmdline Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used to print rendered help text."""
from rich.console import Console

console = Console(color_system="truecolor")
