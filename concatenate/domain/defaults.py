"""Built-in configurations written by `concatenate init`."""

from typing import Any, Dict

DEFAULT_CONFIGURATIONS: Dict[str, Dict[str, Any]] = {
    "check": {
        "type": "parallel",
        "actions": [
            {
                "id": "ruff",
                "label": "Checking with Ruff",
                "command": "ruff check .",
            },
            {
                "id": "format",
                "label": "Checking formatting with Ruff",
                "command": "ruff format --check .",
            },
            {
                "id": "mypy",
                "label": "Checking with mypy",
                "command": "mypy .",
            },
            {
                "id": "pytest",
                "label": "Running tests with pytest",
                "command": "pytest -q",
            },
        ],
    },
    "fix": {
        "type": "series",
        "actions": [
            {
                "id": "ruff",
                "label": "Fixing with Ruff",
                "command": "ruff check --fix .",
            },
            {
                "id": "format",
                "label": "Formatting with Ruff",
                "command": "ruff format .",
            },
        ],
    },
}
