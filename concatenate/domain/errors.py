"""Error taxonomy for loading, selecting and running actions."""

from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:
    from concatenate.domain.models import ExecutionReport

NO_IDS_MARKER = "(none - no actions have IDs defined)"


class ConcatenateError(Exception):
    """Base class for every error surfaced to the CLI"""
    pass


class ConfigurationLoadError(ConcatenateError):
    """Configuration file could not be found, read or parsed"""
    pass


class ConfigDiscoveryError(ConfigurationLoadError):
    """Zero or several configuration files match the requested name"""
    pass


class ConfigReadError(ConfigurationLoadError):
    """Configuration file exists but cannot be read as UTF-8 text"""
    pass


class ConfigParseError(ConfigurationLoadError):
    """Configuration content is not valid for its extension"""
    pass


class SchemaValidationError(ConcatenateError):
    """Parsed configuration does not match the expected shape"""

    def __init__(self, violations: Sequence[str]):
        self.violations: List[str] = list(violations)
        lines = "\n".join(f"  - {v}" for v in self.violations)
        super().__init__(f"Invalid configuration ({len(self.violations)} error(s)):\n{lines}")


class DuplicateIdentifierError(ConcatenateError):
    """Two or more actions share the same id"""

    def __init__(self, duplicates: Sequence[str]):
        self.duplicates: List[str] = list(duplicates)
        super().__init__(
            f"Duplicate action IDs found in configuration: {', '.join(self.duplicates)}. "
            "Each action must have a unique ID."
        )


class UnknownIdentifierError(ConcatenateError):
    """Requested ids are not defined by any action"""

    def __init__(self, missing: Sequence[str], available: Sequence[str]):
        self.missing: List[str] = list(missing)
        self.available: List[str] = list(available)
        known = ", ".join(self.available) if self.available else NO_IDS_MARKER
        super().__init__(
            f"The following action IDs were not found: {', '.join(self.missing)}. "
            f"Available IDs: {known}"
        )


class ActionExecutionFault(ConcatenateError):
    """An action exited non-zero or could not be launched.

    Only used between the per-action task and its scheduler; the report has
    already been recorded when this is raised.
    """

    def __init__(self, report: "ExecutionReport"):
        self.report = report
        super().__init__(report.title)


class RunFailedError(ConcatenateError):
    """One or more actions failed; details were already printed"""

    def __init__(self, message: str = "Some tasks failed"):
        super().__init__(message)
