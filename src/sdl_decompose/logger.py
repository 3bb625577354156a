"""Logging for sdl-decompose with a few CLI output helpers."""

import logging

from rich.console import Console
from rich.logging import RichHandler


class SDLDecomposeLogger(logging.Logger):
    """
    Logger that writes through Rich and offers plain console output for the CLI.

    Diagnostics go through the standard levels (debug, info, warning, error) and end up on
    stderr. Results meant for the user (the decomposed SDL itself) go through ``print`` on
    stdout, so they can be piped.
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        """
        Initialize the logger.

        Args:
            name: Logger name
            level: Initial log level
        """
        super().__init__(name, level)
        self.console = Console(soft_wrap=True)
        self.error_console = Console(stderr=True)

        handler = RichHandler(
            console=self.error_console,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.addHandler(handler)

    def print(self, message: str, markup: bool = True) -> None:
        """
        Print a message to stdout.

        Args:
            message: Message to display
            markup: Whether Rich markup in the message is interpreted. SDL text should be
                printed with markup disabled, since ``[Post!]!`` looks like a markup tag.
        """
        self.console.print(message, markup=markup, highlight=markup, emoji=markup)

    def success(self, message: str) -> None:
        """
        Print a success message in green with checkmark icon.

        Args:
            message: Message to display
        """
        self.print(f"[green]✓[/green] {message}")

    def hint(self, message: str) -> None:
        """
        Print a dimmed hint/secondary message.

        Args:
            message: Message to display
        """
        self.print(f"[dim]{message}[/dim]")


def get_logger(name: str = "sdl_decompose") -> SDLDecomposeLogger:
    """
    Get or create an sdl-decompose logger instance.

    Args:
        name: Logger name (default: "sdl_decompose")

    Returns:
        SDLDecomposeLogger instance
    """
    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(SDLDecomposeLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous_class)

    return logger  # type: ignore[return-value]
