import json
import logging
from pathlib import Path

import pytest

from tastypy.config import CONFIG_FILE_NAMES, ConfigLoader, ConfigResolver, empty_config, find_config_file, resolve_extends
from tastypy.config.resolver import is_package_specifier, split_package_specifier


def write_json(path: Path, document: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def write_text(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_closer_configs_merge_over_root(tmp_path: Path) -> None:
    write_json(tmp_path / "tasty.config.json", {"tokens": ["#root"], "states": ["@mobile"]})
    write_json(tmp_path / "app" / "tasty.config.json", {"tokens": ["#app"]})

    config = ConfigResolver().resolve(tmp_path / "app" / "src" / "Button.tsx", tmp_path)

    assert config.tokens == ("#root", "#app")
    assert config.states == ("@mobile",)


def test_false_in_closer_config_wins(tmp_path: Path) -> None:
    write_json(tmp_path / "tasty.config.json", {"tokens": ["#root"]})
    write_json(tmp_path / "app" / "tasty.config.json", {"tokens": False})

    config = ConfigResolver().resolve(tmp_path / "app" / "Button.tsx", tmp_path)

    assert config.tokens is False


def test_list_after_false_starts_fresh(tmp_path: Path) -> None:
    write_json(tmp_path / "tasty.config.json", {"units": False})
    write_json(tmp_path / "app" / "tasty.config.json", {"units": ["cols"]})

    config = ConfigResolver().resolve(tmp_path / "app" / "Button.tsx", tmp_path)

    assert config.units == ("cols",)


def test_relative_extends_merges_before_the_file(tmp_path: Path) -> None:
    write_json(tmp_path / "configs" / "base.json", {"tokens": ["#base", "#shared"], "units": ["cols"]})
    write_json(tmp_path / "tasty.config.json", {"extends": "./configs/base.json", "tokens": ["#own"]})

    config = ConfigResolver().resolve(tmp_path / "Button.tsx", tmp_path)

    assert config.tokens == ("#base", "#shared", "#own")
    assert "cols" in config.units


def test_extends_without_suffix_or_to_directory(tmp_path: Path) -> None:
    base = write_json(tmp_path / "configs" / "base.json", {"presets": ["h1"]})
    shared = write_json(tmp_path / "shared" / "tasty.config.json", {"recipes": ["card"]})
    declaring = tmp_path / "tasty.config.json"

    assert resolve_extends(declaring, "./configs/base") == base
    assert resolve_extends(declaring, "./shared") == shared
    assert resolve_extends(declaring, "./missing") is None


def test_scoped_package_extends(tmp_path: Path) -> None:
    package = tmp_path / "node_modules" / "@acme" / "design"
    write_json(package / "package.json", {"name": "@acme/design"})
    write_json(package / "tasty.config.json", {"tokens": ["#brand"]})
    write_json(tmp_path / "app" / "tasty.config.json", {"extends": "@acme/design", "tokens": ["#app"]})

    config = ConfigResolver().resolve(tmp_path / "app" / "Button.tsx", tmp_path)

    assert config.tokens == ("#brand", "#app")


def test_package_subpath_with_toml_config(tmp_path: Path) -> None:
    package = tmp_path / "node_modules" / "theme"
    write_json(package / "package.json", {"name": "theme"})
    write_text(package / "presets" / "tasty.config.toml", '[tasty]\npresets = ["h1", "t2"]\n')
    write_json(tmp_path / "tasty.config.json", {"extends": "theme/presets"})

    config = ConfigResolver().resolve(tmp_path / "Button.tsx", tmp_path)

    assert config.presets == ("h1", "t2")


def test_missing_package_is_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    write_json(tmp_path / "tasty.config.json", {"extends": "not-installed", "tokens": ["#own"]})

    with caplog.at_level(logging.WARNING):
        config = ConfigResolver().resolve(tmp_path / "Button.tsx", tmp_path)

    assert config.tokens == ("#own",)
    assert "Could not find package 'not-installed'" in caplog.text
    assert "Could not resolve extends" in caplog.text


def test_cyclic_extends_is_ignored(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    write_json(tmp_path / "tasty.config.json", {"extends": "./other.json", "tokens": ["#root"]})
    write_json(tmp_path / "other.json", {"extends": "./tasty.config.json", "tokens": ["#other"]})

    with caplog.at_level(logging.WARNING):
        config = ConfigResolver().resolve(tmp_path / "Button.tsx", tmp_path)

    assert config.tokens == ("#other", "#root")
    assert "Ignoring cyclic extends" in caplog.text


def test_broken_config_contributes_nothing(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    write_text(tmp_path / "tasty.config.json", "{not json")

    with caplog.at_level(logging.WARNING):
        config = ConfigResolver().resolve(tmp_path / "Button.tsx", tmp_path)

    assert config == empty_config()
    assert "Failed to load config file" in caplog.text


def test_non_object_config_contributes_nothing(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    write_json(tmp_path / "tasty.config.json", ["#a"])

    with caplog.at_level(logging.WARNING):
        config = ConfigResolver().resolve(tmp_path / "Button.tsx", tmp_path)

    assert config == empty_config()
    assert "does not contain a config object" in caplog.text


def test_script_config_needs_a_registered_reader(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    write_text(tmp_path / "tasty.config.ts", "export default { tokens: ['#ts'] };\n")

    with caplog.at_level(logging.WARNING):
        unread = ConfigResolver().resolve(tmp_path / "Button.tsx", tmp_path)

    assert unread == empty_config()
    assert "No reader registered" in caplog.text

    loader = ConfigLoader(readers={".ts": lambda path: {"default": {"tokens": ["#ts"]}}})
    config = ConfigResolver(loader).resolve(tmp_path / "Button.tsx", tmp_path)

    assert config.tokens == ("#ts",)


def test_merged_results_are_cached_until_invalidated(tmp_path: Path) -> None:
    config_path = write_json(tmp_path / "tasty.config.json", {"tokens": ["#a"]})
    resolver = ConfigResolver()

    first = resolver.resolve(tmp_path / "Button.tsx", tmp_path)
    write_json(config_path, {"tokens": ["#b"]})

    assert resolver.resolve(tmp_path / "Card.tsx", tmp_path) is first

    resolver.invalidate(config_path)

    assert resolver.resolve(tmp_path / "Button.tsx", tmp_path).tokens == ("#b",)


def test_affecting_config_files_closest_first(tmp_path: Path) -> None:
    root_config = write_json(tmp_path / "tasty.config.json", {})
    app_config = write_json(tmp_path / "app" / "tasty.config.json", {})

    files = ConfigResolver().affecting_config_files(tmp_path / "app" / "ui" / "Button.tsx", tmp_path)

    assert files == [app_config, root_config]


def test_files_outside_project_root_get_defaults(tmp_path: Path) -> None:
    write_json(tmp_path / "project" / "tasty.config.json", {"tokens": ["#a"]})

    config = ConfigResolver().resolve(tmp_path / "elsewhere" / "Button.tsx", tmp_path / "project")

    assert config == empty_config()


def test_json_preferred_over_toml(tmp_path: Path) -> None:
    json_config = write_json(tmp_path / "tasty.config.json", {})
    write_text(tmp_path / "tasty.config.toml", "")

    assert find_config_file(tmp_path) == json_config
    assert CONFIG_FILE_NAMES[0] == "tasty.config.json"


def test_toml_config_without_table_reads_top_level(tmp_path: Path) -> None:
    path = write_text(tmp_path / "tasty.config.toml", 'tokens = ["#a"]\nfuncs = false\n')

    config = ConfigLoader().load(path)

    assert config is not None
    assert config.tokens == ("#a",)
    assert config.funcs is False


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("theme", True),
        ("theme/presets", True),
        ("@acme/design", True),
        ("@acme/design/dark", True),
        ("./base", False),
        ("../base.json", False),
        ("/abs/base.json", False),
        ("@acme", False),
    ],
)
def test_is_package_specifier(value: str, expected: bool) -> None:
    assert is_package_specifier(value) is expected


def test_split_package_specifier() -> None:
    assert split_package_specifier("@acme/design/dark/x") == ("@acme/design", "dark/x")
    assert split_package_specifier("theme/presets") == ("theme", "presets")
    assert split_package_specifier("theme") == ("theme", "")


def test_failing_injected_reader_contributes_nothing(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    write_text(tmp_path / "tasty.config.ts", "export default {};\n")

    def failing_reader(path: Path) -> object:
        raise RuntimeError("evaluator crashed")

    resolver = ConfigResolver(ConfigLoader(readers={".ts": failing_reader}))

    with caplog.at_level(logging.WARNING):
        config = resolver.resolve(tmp_path / "Button.tsx", tmp_path)

    assert config == empty_config()
    assert "Config reader for" in caplog.text
    assert "evaluator crashed" in caplog.text


def test_merged_results_are_cached_per_project_root(tmp_path: Path) -> None:
    write_json(tmp_path / "tasty.config.json", {"tokens": ["#outer"]})
    write_json(tmp_path / "app" / "tasty.config.json", {"tokens": ["#app"]})
    resolver = ConfigResolver()

    narrow = resolver.resolve(tmp_path / "app" / "Button.tsx", tmp_path / "app")
    wide = resolver.resolve(tmp_path / "app" / "Button.tsx", tmp_path)

    assert narrow.tokens == ("#app",)
    assert wide.tokens == ("#outer", "#app")
