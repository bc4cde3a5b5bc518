"""Config file discovery and loading.

JSON and TOML files are read directly. Script configs (`.ts`, `.js`,
`.mjs`) need an evaluator supplied by the embedding process through
`ConfigLoader(readers=...)`; a reader takes the file path and returns the
exported config object.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final, TypeAlias

from tastypy.config.model import TastyConfig, normalize_config

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES: Final[tuple[str, ...]] = (
    "tasty.config.json",
    "tasty.config.toml",
    "tasty.config.ts",
    "tasty.config.js",
    "tasty.config.mjs",
)

CONFIG_SUFFIXES: Final[tuple[str, ...]] = tuple(Path(name).suffix for name in CONFIG_FILE_NAMES)

ConfigReader: TypeAlias = Callable[[Path], object]


def find_config_file(directory: Path) -> Path | None:
    """First config file present in `directory`, by file-name preference."""
    for name in CONFIG_FILE_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def read_json_config(path: Path) -> object:
    return json.loads(path.read_text(encoding="utf-8"))


def read_toml_config(path: Path) -> object:
    document = tomllib.loads(path.read_text(encoding="utf-8"))
    tasty = document.get("tasty")
    if isinstance(tasty, dict):
        return tasty
    return document


class ConfigLoader:
    """Reads and normalizes single config files. Failures are logged and yield `None`."""

    def __init__(self, readers: Mapping[str, ConfigReader] | None = None) -> None:
        self._readers: dict[str, ConfigReader] = {
            ".json": read_json_config,
            ".toml": read_toml_config,
        }
        self._injected = frozenset(readers or ())
        if readers:
            self._readers.update(readers)

    def load(self, path: Path) -> TastyConfig | None:
        reader = self._readers.get(path.suffix)
        if reader is None:
            logger.warning("No reader registered for config file %s; ignoring it", path)
            return None

        try:
            document = reader(path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Failed to load config file %s: %s", path, exc)
            return None
        except Exception as exc:
            # Injected readers can raise anything.
            if path.suffix not in self._injected:
                raise
            logger.warning("Config reader for %s failed: %s", path, exc)
            return None

        # Script configs may export `{ default: {...} }`.
        if isinstance(document, Mapping) and isinstance(document.get("default"), Mapping):
            document = document["default"]

        config = normalize_config(document)
        if config is None:
            logger.warning("Config file %s does not contain a config object", path)
        return config
