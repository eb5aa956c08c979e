"""Console output formatting utilities for start."""

from __future__ import annotations

import sys
from typing import Optional

class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show each directive and full stack traces
        """
        self.debug = debug

    def print_run_started(self, script: str) -> None:
        """Print run start information."""
        print(f"Running script '{script}'...")

    def print_directive(self, line_no: int, command: str, args: tuple[str, ...]) -> None:
        """Print a directive before it runs (debug only)."""
        if self.debug:
            rendered = " ".join([command, *(repr(a) if " " in a else a for a in args)])
            print(f"[{line_no}] {rendered}", file=sys.stderr)

    def print_usage_error(self, message: str, help_text: Optional[str] = None) -> None:
        """Print a bad-invocation message, optionally followed by the help text."""
        print(message)
        if help_text:
            print(help_text)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        print(message, file=sys.stderr)

    def print_exception(self, exc: BaseException) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__)
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        print(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
