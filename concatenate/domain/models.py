"""Domain data models — configuration schema and run records."""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Mode(str, Enum):
    """How the actions of a configuration are scheduled."""

    SERIES = "series"  # one after another, stop on first failure
    PARALLEL = "parallel"  # all at once, collect every result


class Action(BaseModel):
    """One shell command with its display label and optional id."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    identifier: Optional[str] = Field(default=None, alias="id")
    label: str
    command: str

    @property
    def is_selectable(self) -> bool:
        return bool(self.identifier)


class Configuration(BaseModel):
    """Validated unit of work: execution mode plus ordered actions."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mode: Mode = Field(alias="type")
    actions: Tuple[Action, ...]


@dataclass(frozen=True)
class ExecutionReport:
    """Outcome of one executed action."""

    title: str
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def message(self) -> str:
        return "\n\n".join([self.stderr, self.stdout]).strip()

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


@dataclass
class RunContext:
    """Append-only report collection shared by the tasks of one run."""

    _reports: List[ExecutionReport] = field(default_factory=list, init=False)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    async def record(self, report: ExecutionReport) -> None:
        async with self._lock:
            self._reports.append(report)

    @property
    def reports(self) -> Tuple[ExecutionReport, ...]:
        return tuple(self._reports)

    @property
    def failures(self) -> Tuple[ExecutionReport, ...]:
        return tuple(r for r in self._reports if not r.succeeded)

    @property
    def failed(self) -> bool:
        return any(not r.succeeded for r in self._reports)
