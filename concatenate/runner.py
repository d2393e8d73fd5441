"""Load, select, execute and report one configuration."""

from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console

from concatenate.adapters.process.shell_runner import ShellRunner
from concatenate.adapters.storage.config_loader import find_config_directory, load_configuration
from concatenate.config import AppConfig, child_environment
from concatenate.domain.errors import RunFailedError
from concatenate.domain.models import RunContext
from concatenate.domain.selector import select_actions
from concatenate.engine import ExecutionEngine
from concatenate.infrastructure.logger import ConsoleLogger
from concatenate.ports.outbound import LoggerPort, ProcessRunnerPort
from concatenate.presenter import present_failures


class CommandRunner:
    """Entry point used by the CLI."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        runner: Optional[ProcessRunnerPort] = None,
        logger: Optional[LoggerPort] = None,
        console: Optional[Console] = None,
        start_dir: Optional[str] = None,
    ):
        self.config = config or AppConfig.from_env()
        self.runner = runner or ShellRunner()
        self.logger = logger or ConsoleLogger()
        self.console = console
        self.start_dir = start_dir

    async def run(
        self,
        configuration_name: Optional[str] = None,
        ids: Optional[Sequence[str]] = None,
    ) -> RunContext:
        """Run a configuration, optionally narrowed to `ids`.

        Raises a ConcatenateError subclass when loading, validation or
        selection fails, and RunFailedError once failed actions were printed.
        """
        directory = find_config_directory(self.start_dir, self.config.config_dirname)
        configuration = load_configuration(
            configuration_name or self.config.default_config_name,
            directory,
        )

        actions = list(configuration.actions)
        if ids:
            actions = select_actions(actions, ids, self.logger)

        engine = ExecutionEngine(
            self.runner,
            cwd=str(Path(directory).parent),
            env=self.config.env or child_environment(self.config.force_color),
            logger=self.logger,
        )
        context = await engine.execute(actions, configuration.mode)

        if context.failed:
            present_failures(context, self.console)
            raise RunFailedError()
        return context
