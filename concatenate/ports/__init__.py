"""Port interfaces (Hexagonal Architecture)."""

from concatenate.ports.outbound import LoggerPort, ProcessResult, ProcessRunnerPort

__all__ = [
    "LoggerPort",
    "ProcessResult",
    "ProcessRunnerPort",
]
