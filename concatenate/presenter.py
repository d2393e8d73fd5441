"""Render the captured output of failed actions."""

from typing import Optional

from rich.console import Console
from rich.text import Text

from concatenate.domain.models import RunContext

SEPARATOR = "-" * 33


def present_failures(context: RunContext, console: Optional[Console] = None) -> int:
    """Print a block per failed report and return how many were printed.

    Reports may arrive in any order in parallel runs, so failures are
    picked by exit code only.
    """
    console = console or Console(highlight=False)
    failures = context.failures
    for report in failures:
        console.print()
        console.print()
        console.print(Text(report.title, style="black on yellow"))
        console.print(SEPARATOR)
        console.print(Text.from_ansi(report.message))
    return len(failures)
