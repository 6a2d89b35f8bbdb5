"""Rich console and logging helpers for terminal output."""

import logging
from typing import Any

from rich.console import Console as RichConsole
from rich.logging import RichHandler
from rich.markup import escape


class Console:
    """Wrapper around rich.Console that stays quiet in JSON mode."""

    def __init__(self) -> None:
        self._console = RichConsole()
        self._err_console = RichConsole(stderr=True)
        self._json_mode = False

    def set_json_mode(self, enabled: bool) -> None:
        """Enable or disable JSON mode (suppresses rich output)."""
        self._json_mode = enabled

    @property
    def json_mode(self) -> bool:
        return self._json_mode

    def print(self, *args: Any, **kwargs: Any) -> None:
        if not self._json_mode:
            self._console.print(*args, **kwargs)

    def print_success(self, message: str) -> None:
        self.print(f"[green]✓[/green] {message}")

    def print_error(self, message: str) -> None:
        # Shown in JSON mode too, on stderr
        self._err_console.print(f"[red]✗[/red] {escape(message)}", highlight=False)

    def print_info(self, message: str) -> None:
        self.print(f"[blue]ℹ[/blue] {message}")

    def print_warning(self, message: str) -> None:
        self.print(f"[yellow]⚠[/yellow] {message}")

    def print_code(self, text: str) -> None:
        """Print text verbatim, without markup or highlighting."""
        self.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def format_size(size: int) -> str:
    """Format a byte count as B, KB or MB."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.2f} KB"
    return f"{size / (1024 * 1024):.2f} MB"


def setup_logging(verbose: bool) -> None:
    """Route ore's debug logging to stderr through rich when verbose."""
    logger = logging.getLogger("ore")
    logger.handlers = []
    if not verbose:
        logger.setLevel(logging.WARNING)
        return

    handler = RichHandler(console=RichConsole(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


# Global console instance
console = Console()
