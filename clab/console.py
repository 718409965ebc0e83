# CLAB Command Line Arguments Builder — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for CLAB output."""
from rich.console import Console

console = Console(color_system="truecolor")
