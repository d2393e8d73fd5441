"""Configuration files on disk."""

from concatenate.adapters.storage.config_loader import (
    find_config_directory,
    find_config_file,
    list_config_names,
    load_configuration,
    parse_config_data,
    read_config_file,
)

__all__ = [
    "find_config_directory",
    "find_config_file",
    "list_config_names",
    "load_configuration",
    "parse_config_data",
    "read_config_file",
]
