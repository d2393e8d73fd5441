"""Runs actions as child processes under a series or parallel scheduler."""

import asyncio
from typing import Awaitable, Callable, Dict, List, Optional, Protocol, Sequence

from concatenate.domain.errors import ActionExecutionFault
from concatenate.domain.models import Action, ExecutionReport, Mode, RunContext
from concatenate.ports.outbound import LoggerPort, ProcessResult, ProcessRunnerPort

ActionTask = Callable[[], Awaitable[ExecutionReport]]

# Exit code recorded when the runner itself raised instead of returning a result.
EXIT_TASK_FAULT = 1


class Scheduler(Protocol):
    """Drives per-action tasks; tasks record their own reports."""

    async def schedule(self, tasks: Sequence[ActionTask]) -> None: ...


class SeriesScheduler:
    """One task at a time, stopping at the first failed action"""

    async def schedule(self, tasks: Sequence[ActionTask]) -> None:
        for task in tasks:
            try:
                await task()
            except ActionExecutionFault:
                return


class ParallelScheduler:
    """Launch every task and wait for all of them to settle"""

    async def schedule(self, tasks: Sequence[ActionTask]) -> None:
        results = await asyncio.gather(*(task() for task in tasks), return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException) and not isinstance(result, ActionExecutionFault):
                raise result


SCHEDULERS: Dict[Mode, Scheduler] = {
    Mode.SERIES: SeriesScheduler(),
    Mode.PARALLEL: ParallelScheduler(),
}


def get_scheduler(mode: Mode) -> Scheduler:
    return SCHEDULERS[Mode(mode)]


class ExecutionEngine:
    """Runs an ordered list of actions and collects one report per attempt."""

    def __init__(
        self,
        runner: ProcessRunnerPort,
        cwd: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
        logger: Optional[LoggerPort] = None,
    ):
        self.runner = runner
        self.cwd = cwd
        self.env = env
        self.logger = logger

    def _task(self, action: Action, context: RunContext) -> ActionTask:
        async def run_action() -> ExecutionReport:
            try:
                result = await self.runner.run(action.command, cwd=self.cwd, env=self.env)
            except Exception as e:
                result = ProcessResult(
                    exit_code=EXIT_TASK_FAULT,
                    stderr=f"Failed to run {action.command!r}: {e}",
                )
            report = ExecutionReport(
                title=action.label,
                exit_code=result.exit_code,
                stdout=result.stdout,
                stderr=result.stderr,
            )
            await context.record(report)
            self._log_outcome(report)
            if not report.succeeded:
                raise ActionExecutionFault(report)
            return report

        return run_action

    def _log_outcome(self, report: ExecutionReport):
        if self.logger is None:
            return
        if report.succeeded:
            self.logger.success(report.title)
        else:
            self.logger.error(f"{report.title} (exit code {report.exit_code})")

    async def execute(self, actions: Sequence[Action], mode: Mode) -> RunContext:
        """Run `actions` under the scheduler for `mode`.

        The returned context holds a report for every action that was
        attempted; `context.failed` tells whether any of them failed.
        """
        context = RunContext()
        tasks: List[ActionTask] = [self._task(action, context) for action in actions]
        await get_scheduler(mode).schedule(tasks)
        return context
