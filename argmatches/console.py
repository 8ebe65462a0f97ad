# argmatches — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for argmatches output."""
from rich.console import Console

from argmatches.themes import get_matches_theme

console = Console(color_system="truecolor", theme=get_matches_theme())
