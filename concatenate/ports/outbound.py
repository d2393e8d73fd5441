"""Outbound ports — interfaces for console output and process execution."""

from dataclasses import dataclass
from typing import Dict, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class ProcessResult:
    """Captured outcome of one child process."""

    exit_code: int
    stdout: str = ""
    stderr: str = ""


@runtime_checkable
class LoggerPort(Protocol):
    """Semantic-level user messages; formatting is left to the adapter."""

    def title(self, message: str) -> None: ...
    def info(self, message: str) -> None: ...
    def success(self, message: str) -> None: ...
    def warn(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def skip_line(self) -> None: ...


@runtime_checkable
class ProcessRunnerPort(Protocol):
    """Interface for running a shell command line to completion."""

    async def run(
        self,
        command: str,
        cwd: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
    ) -> ProcessResult: ...
