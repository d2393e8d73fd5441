"""concatenate — run configured shell actions in series or in parallel."""

from concatenate.config import __version__, AppConfig
from concatenate.domain import (
    Action,
    Configuration,
    ExecutionReport,
    Mode,
    RunContext,
    dump_configuration,
    parse_configuration,
    select_actions,
)
from concatenate.domain.errors import (
    ActionExecutionFault,
    ConcatenateError,
    ConfigDiscoveryError,
    ConfigParseError,
    ConfigReadError,
    DuplicateIdentifierError,
    RunFailedError,
    SchemaValidationError,
    UnknownIdentifierError,
)
from concatenate.engine import ExecutionEngine, ParallelScheduler, SeriesScheduler
from concatenate.runner import CommandRunner
from concatenate.setup_runner import SetupRunner

__all__ = [
    "__version__",
    "AppConfig",
    "Action",
    "Configuration",
    "ExecutionReport",
    "Mode",
    "RunContext",
    "dump_configuration",
    "parse_configuration",
    "select_actions",
    "ExecutionEngine",
    "ParallelScheduler",
    "SeriesScheduler",
    "CommandRunner",
    "SetupRunner",
    "ActionExecutionFault",
    "ConcatenateError",
    "ConfigDiscoveryError",
    "ConfigParseError",
    "ConfigReadError",
    "DuplicateIdentifierError",
    "RunFailedError",
    "SchemaValidationError",
    "UnknownIdentifierError",
]
