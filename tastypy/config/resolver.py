"""Hierarchical config resolution.

For a document, every config file from its directory up to the project
root contributes, root first, so closer files override. A file's `extends`
target is merged in just before the file itself.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from tastypy.cache import Cache
from tastypy.config.loader import CONFIG_SUFFIXES, ConfigLoader, find_config_file
from tastypy.config.model import MergedConfig, TastyConfig, empty_config, merge_configs

logger = logging.getLogger(__name__)

_SCOPED_PACKAGE = re.compile(r"^@[\w-]+/[\w-]+(/.*)?$")
_PACKAGE = re.compile(r"^[\w-]+(/.*)?$")


class ConfigResolver:
    """Resolves merged configs with two explicit caches.

    Loaded files are cached per path, merged results per directory and
    project root. Neither cache expires; call `invalidate` when a config
    file changes.
    """

    def __init__(self, loader: ConfigLoader | None = None) -> None:
        self._loader = loader or ConfigLoader()
        self._configs: Cache[Path, TastyConfig | None] = Cache()
        self._merged: Cache[tuple[Path, Path], MergedConfig] = Cache()

    def resolve(self, file_path: str | Path, project_root: str | Path) -> MergedConfig:
        directory = _absolute(file_path).parent
        root = _absolute(project_root)
        cached = self._merged.get((directory, root))
        if cached is not None:
            logger.debug("Merged config cache hit for %s", directory)
            return cached
        logger.debug("Merged config cache miss for %s", directory)

        config_paths = list(reversed(_collect_config_files(directory, root)))
        logger.debug("Config files for %s: %s", directory, [str(p) for p in config_paths])

        merged = empty_config()
        for config_path in config_paths:
            config = self._load(config_path)
            if config is not None:
                merged = self._merge_node(merged, config_path, config, frozenset({config_path}))

        self._merged.set((directory, root), merged)
        return merged

    def affecting_config_files(self, file_path: str | Path, project_root: str | Path) -> list[Path]:
        """Config files that contribute to `file_path`, closest first (without `extends` targets)."""
        return _collect_config_files(_absolute(file_path).parent, _absolute(project_root))

    def invalidate(self, config_path: str | Path) -> None:
        """Forget one loaded file. Every merged result is dropped since any may depend on it."""
        self._configs.invalidate(_absolute(config_path))
        self._merged.clear()

    def clear(self) -> None:
        self._configs.clear()
        self._merged.clear()

    def _load(self, config_path: Path) -> TastyConfig | None:
        if config_path in self._configs:
            return self._configs.get(config_path)
        config = self._loader.load(config_path)
        self._configs.set(config_path, config)
        return config

    def _merge_node(
        self,
        merged: MergedConfig,
        config_path: Path,
        config: TastyConfig,
        chain: frozenset[Path],
    ) -> MergedConfig:
        if config.extends:
            target = resolve_extends(config_path, config.extends)
            if target is None:
                logger.warning("Could not resolve extends %r from %s", config.extends, config_path)
            elif target in chain:
                logger.warning("Ignoring cyclic extends %r from %s", config.extends, config_path)
            else:
                base = self._load(target)
                if base is not None:
                    merged = self._merge_node(merged, target, base, chain | {target})
        return merge_configs(merged, config)


def resolve_extends(config_path: Path, target: str) -> Path | None:
    """Locate the config file an `extends` value refers to.

    Paths are relative to the declaring file. Package specifiers
    (`pkg`, `pkg/sub`, `@scope/pkg`, `@scope/pkg/sub`) are looked up in
    `node_modules` directories walking upward.
    """
    base_dir = config_path.parent
    if not is_package_specifier(target):
        return _resolve_config_target(_normalize(base_dir / target))

    package_name, subpath = split_package_specifier(target)
    package_dir = find_package_directory(package_name, base_dir)
    if package_dir is None:
        logger.warning("Could not find package %r from %s", package_name, base_dir)
        return None

    found = find_config_file(package_dir)
    if found is not None:
        return found
    if subpath:
        found = _resolve_config_target(_normalize(package_dir / subpath))
        if found is not None:
            return found

    logger.warning("No tasty config found in package %r at %s", target, package_dir)
    return None


def is_package_specifier(value: str) -> bool:
    if value.startswith((".", "/")) or os.path.isabs(value):
        return False
    if value.startswith("@"):
        return _SCOPED_PACKAGE.match(value) is not None
    return _PACKAGE.match(value) is not None


def split_package_specifier(value: str) -> tuple[str, str]:
    """`@scope/pkg/sub/path` -> (`@scope/pkg`, `sub/path`)."""
    parts = value.split("/")
    split_at = 2 if value.startswith("@") else 1
    return "/".join(parts[:split_at]), "/".join(parts[split_at:])


def find_package_directory(package_name: str, start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / "node_modules" / package_name
        if (candidate / "package.json").is_file():
            return candidate
    return None


def _resolve_config_target(candidate: Path) -> Path | None:
    if candidate.is_dir():
        return find_config_file(candidate)
    if candidate.is_file():
        return candidate
    for suffix in CONFIG_SUFFIXES:
        with_suffix = candidate.with_name(candidate.name + suffix)
        if with_suffix.is_file():
            return with_suffix
    return None


def _collect_config_files(directory: Path, project_root: Path) -> list[Path]:
    """Config files from `directory` up to `project_root`, closest first."""
    found: list[Path] = []
    current = directory
    while current.is_relative_to(project_root):
        config_path = find_config_file(current)
        if config_path is not None:
            found.append(config_path)
        if current == project_root or current.parent == current:
            break
        current = current.parent
    return found


def _absolute(path: str | Path) -> Path:
    return _normalize(Path(path).absolute())


def _normalize(path: Path) -> Path:
    return Path(os.path.normpath(path))
