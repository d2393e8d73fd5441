"""Console logger — implements LoggerPort on top of rich."""

from typing import Optional

from rich.console import Console
from rich.text import Text


class ConsoleLogger:
    """Writes user-facing messages to stderr, one styled line each"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True, highlight=False)

    def _line(self, prefix: str, message: str, style: str):
        text = Text()
        text.append(prefix, style=f"bold {style}")
        text.append(message, style=style)
        self.console.print(text)

    def title(self, message: str) -> None:
        self.console.print(Text(message, style="bold underline"))

    def info(self, message: str) -> None:
        self._line("ℹ ", message, "cyan")

    def success(self, message: str) -> None:
        self._line("✔ ", message, "green")

    def warn(self, message: str) -> None:
        self._line("⚠ ", message, "yellow")

    def error(self, message: str) -> None:
        self._line("✖ ", message, "red")

    def skip_line(self) -> None:
        self.console.print()
