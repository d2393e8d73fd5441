"""Configuration file discovery, reading and parsing."""

from pathlib import Path
from typing import Any, List, Optional, Union

import json5
import yaml

from concatenate.config import CONFIG_DIRNAME, DEFAULT_CONFIG_NAME
from concatenate.domain.errors import ConfigDiscoveryError, ConfigParseError, ConfigReadError
from concatenate.domain.models import Configuration
from concatenate.domain.schema import parse_configuration

YAML_EXTENSIONS = (".yaml", ".yml")
JSON_EXTENSIONS = (".json", ".json5")

PathLike = Union[str, Path]


def find_config_directory(start: Optional[PathLike] = None, dirname: str = CONFIG_DIRNAME) -> Path:
    """Walk up from `start` (default: cwd) to the nearest configuration directory."""
    current = Path(start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        found = candidate / dirname
        if found.is_dir():
            return found
    raise ConfigDiscoveryError(f"Could not find the {dirname} directory from {current}")


def find_config_file(directory: PathLike, name: Optional[str] = None) -> Path:
    """Return the single `<name>.*` file in `directory`."""
    name = name or DEFAULT_CONFIG_NAME
    matches = sorted(p for p in Path(directory).glob(f"{name}.*") if p.is_file())
    if len(matches) != 1:
        raise ConfigDiscoveryError(
            f"There was an issue trying to find the configuration file for {name} "
            f"({len(matches)} match(es) in {directory})"
        )
    return matches[0]


def list_config_names(directory: PathLike) -> List[str]:
    """Names of the loadable configurations in `directory`, sorted."""
    extensions = YAML_EXTENSIONS + JSON_EXTENSIONS
    return sorted({p.stem for p in Path(directory).iterdir() if p.is_file() and p.suffix.lower() in extensions})


def read_config_file(path: PathLike) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(f"There was an issue trying to read the configuration file: {e}") from e


def parse_config_data(path: PathLike, text: str) -> Any:
    """Parse text as YAML or JSON5 depending on the file extension."""
    ext = Path(path).suffix.lower()
    try:
        if ext in YAML_EXTENSIONS:
            return yaml.safe_load(text)
        if ext in JSON_EXTENSIONS:
            return json5.loads(text)
    except (yaml.YAMLError, ValueError) as e:
        raise ConfigParseError(f"There was an issue trying to parse {Path(path).name}: {e}") from e
    raise ConfigParseError(f"Unsupported file type: {ext or '(none)'}")


def load_configuration(name: Optional[str] = None, directory: Optional[PathLike] = None) -> Configuration:
    """Discover, read, parse and validate one configuration."""
    directory = Path(directory) if directory is not None else find_config_directory()
    path = find_config_file(directory, name)
    data = parse_config_data(path, read_config_file(path))
    return parse_configuration(data)
