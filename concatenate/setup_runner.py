"""Scaffold the built-in configurations as YAML or JSON files."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import json5
import yaml

from concatenate.config import SUPPORTED_SETUP_FORMATS
from concatenate.domain.defaults import DEFAULT_CONFIGURATIONS
from concatenate.ports.outbound import LoggerPort


def render(data: Dict[str, Any], extension: str) -> str:
    """Serialise one configuration document for the given format."""
    if extension == "yaml":
        return yaml.safe_dump(data, indent=2, sort_keys=False, allow_unicode=True)
    if extension == "json":
        return json5.dumps(data, indent=2, quote_keys=True, trailing_commas=False) + "\n"
    raise ValueError(f"Unsupported file extension: {extension!r}")


class SetupRunner:
    """Writes every default configuration into the configuration directory"""

    def __init__(self, directory: Union[str, Path], logger: Optional[LoggerPort] = None):
        self.directory = Path(directory)
        self.logger = logger

    def _log(self, level: str, message: str):
        if self.logger is not None:
            getattr(self.logger, level)(message)

    def run(self, extension: str) -> List[Path]:
        extension = extension.strip().lower()
        if extension not in SUPPORTED_SETUP_FORMATS:
            raise ValueError(
                f"Unsupported file extension: {extension!r} "
                f"(expected one of {', '.join(SUPPORTED_SETUP_FORMATS)})"
            )

        self._log("title", f"Creating configuration with format: {extension}")
        self.directory.mkdir(parents=True, exist_ok=True)

        written = []
        for name, data in DEFAULT_CONFIGURATIONS.items():
            path = self.directory / f"{name}.{extension}"
            self._log("info", f"Writing file <{path}>")
            path.write_text(render(data, extension), encoding="utf-8")
            written.append(path)

        self._log("success", "Configuration files created.")
        return written
