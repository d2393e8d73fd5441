"""Domain layer — pure Python, no process or file access."""

from concatenate.domain.defaults import DEFAULT_CONFIGURATIONS
from concatenate.domain.errors import (
    ActionExecutionFault,
    ConcatenateError,
    ConfigDiscoveryError,
    ConfigParseError,
    ConfigReadError,
    ConfigurationLoadError,
    DuplicateIdentifierError,
    RunFailedError,
    SchemaValidationError,
    UnknownIdentifierError,
)
from concatenate.domain.models import Action, Configuration, ExecutionReport, Mode, RunContext
from concatenate.domain.schema import dump_configuration, parse_configuration
from concatenate.domain.selector import find_duplicate_ids, select_actions

__all__ = [
    "DEFAULT_CONFIGURATIONS",
    "Action",
    "Configuration",
    "ExecutionReport",
    "Mode",
    "RunContext",
    "dump_configuration",
    "parse_configuration",
    "find_duplicate_ids",
    "select_actions",
    "ActionExecutionFault",
    "ConcatenateError",
    "ConfigDiscoveryError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigurationLoadError",
    "DuplicateIdentifierError",
    "RunFailedError",
    "SchemaValidationError",
    "UnknownIdentifierError",
]
