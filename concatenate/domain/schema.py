"""Schema validation for parsed configuration documents.

Pure Python over pydantic, no file or process access.
"""

from typing import Any, Dict, List

from pydantic import ValidationError

from concatenate.domain.errors import SchemaValidationError
from concatenate.domain.models import Configuration


def _format_location(loc) -> str:
    if not loc:
        return "<root>"
    return ".".join(str(part) for part in loc)


def format_violations(error: ValidationError) -> List[str]:
    """One readable line per defect reported by pydantic."""
    return [
        f"{_format_location(detail['loc'])}: {detail['msg']}"
        for detail in error.errors()
    ]


def parse_configuration(data: Any) -> Configuration:
    """Validate a parsed YAML/JSON value into a Configuration.

    Raises SchemaValidationError listing every violation, not only the first.
    """
    try:
        return Configuration.model_validate(data)
    except ValidationError as e:
        raise SchemaValidationError(format_violations(e)) from e


def dump_configuration(configuration: Configuration) -> Dict[str, Any]:
    """Render a Configuration back to the document shape it was parsed from."""
    return configuration.model_dump(mode="json", by_alias=True, exclude_none=True)
