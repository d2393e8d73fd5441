"""Configuration and shared settings."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field
from typing import Dict

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

_TRUTHY = ("1", "true", "yes", "on")

# Directory holding the configuration files; actions run in its parent.
CONFIG_DIRNAME = os.getenv("CONCATENATE_DIR", ".concatenate").strip() or ".concatenate"

DEFAULT_CONFIG_NAME = os.getenv("CONCATENATE_DEFAULT_CONFIG", "default").strip() or "default"

FORCE_COLOR = os.getenv("CONCATENATE_FORCE_COLOR", "true").strip().lower() in _TRUTHY

SUPPORTED_SETUP_FORMATS = ("yaml", "json")
SETUP_FORMAT = os.getenv("CONCATENATE_SETUP_FORMAT", "yaml").strip().lower()
if SETUP_FORMAT not in SUPPORTED_SETUP_FORMATS:
    _stderr_print(f"Unsupported CONCATENATE_SETUP_FORMAT={SETUP_FORMAT!r}, falling back to 'yaml'")
    SETUP_FORMAT = "yaml"


def child_environment(force_color: bool = FORCE_COLOR) -> Dict[str, str]:
    """Environment handed to every action process."""
    env = dict(os.environ)
    if force_color:
        env["FORCE_COLOR"] = "1"
    return env


@dataclass
class AppConfig:
    """Typed view over the environment-driven settings."""

    config_dirname: str = ".concatenate"
    default_config_name: str = "default"
    setup_format: str = "yaml"
    force_color: bool = True
    env: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            config_dirname=CONFIG_DIRNAME,
            default_config_name=DEFAULT_CONFIG_NAME,
            setup_format=SETUP_FORMAT,
            force_color=FORCE_COLOR,
            env=child_environment(FORCE_COLOR),
        )
