"""Project configuration: loading, merging and per-directory resolution."""

from tastypy.config.loader import CONFIG_FILE_NAMES, ConfigLoader, ConfigReader, find_config_file
from tastypy.config.model import MergedConfig, TastyConfig, empty_config, merge_configs, normalize_config
from tastypy.config.resolver import ConfigResolver, resolve_extends

__all__ = [
    "CONFIG_FILE_NAMES",
    "ConfigLoader",
    "ConfigReader",
    "ConfigResolver",
    "MergedConfig",
    "TastyConfig",
    "empty_config",
    "find_config_file",
    "merge_configs",
    "normalize_config",
    "resolve_extends",
]
