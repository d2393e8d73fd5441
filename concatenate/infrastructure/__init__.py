"""Console output helpers."""

from concatenate.infrastructure.logger import ConsoleLogger

__all__ = ["ConsoleLogger"]
