from tastypy.builtins import BUILT_IN_UNITS
from tastypy.config import MergedConfig, TastyConfig, empty_config, merge_configs, normalize_config


def test_empty_config_defaults() -> None:
    config = empty_config()

    assert config.tokens is False
    assert config.funcs is False
    assert config.units == BUILT_IN_UNITS
    assert config.states == ()
    assert config.token_descriptions == {}


def test_lists_union_in_first_occurrence_order() -> None:
    merged = merge_configs(empty_config(), TastyConfig(tokens=("#a", "#b"), states=("@mobile",)))
    merged = merge_configs(merged, TastyConfig(tokens=("#b", "#c"), states=("@tablet", "@mobile")))

    assert merged.tokens == ("#a", "#b", "#c")
    assert merged.states == ("@mobile", "@tablet")


def test_merging_same_override_twice_is_idempotent() -> None:
    override = TastyConfig(tokens=("#a", "#a", "#b"), presets=("h1",), funcs=("double",))

    once = merge_configs(empty_config(), override)
    twice = merge_configs(once, override)

    assert once == twice
    assert once.tokens == ("#a", "#b")


def test_false_overrides_any_accumulated_list() -> None:
    base = merge_configs(empty_config(), TastyConfig(tokens=("#a",), units=("cols",), funcs=("double",)))

    merged = merge_configs(base, TastyConfig(tokens=False, units=False, funcs=False))

    assert merged.tokens is False
    assert merged.units is False
    assert merged.funcs is False


def test_list_after_false_starts_fresh() -> None:
    base = merge_configs(empty_config(), TastyConfig(units=False))

    merged = merge_configs(base, TastyConfig(units=("cols",)))

    assert merged.units == ("cols",)


def test_units_extend_built_ins() -> None:
    merged = merge_configs(empty_config(), TastyConfig(units=("cols", "x")))

    assert merged.units == (*BUILT_IN_UNITS, "cols")


def test_descriptions_shallow_merge() -> None:
    base = merge_configs(empty_config(), TastyConfig(token_descriptions={"#a": "Accent", "#b": "Border"}))

    merged = merge_configs(base, TastyConfig(token_descriptions={"#b": "Brand"}))

    assert merged.token_descriptions == {"#a": "Accent", "#b": "Brand"}
    assert base.token_descriptions == {"#a": "Accent", "#b": "Border"}


def test_empty_override_returns_base() -> None:
    base = MergedConfig(tokens=("#a",))

    assert merge_configs(base, TastyConfig()) is base


def test_normalize_config_reads_known_keys() -> None:
    config = normalize_config(
        {
            "extends": "../base",
            "tokens": ["#a", 3, "$gap"],
            "units": False,
            "states": ["@mobile"],
            "presets": "h1",
            "tokenDescriptions": {"#a": "Accent", "#b": 1},
            "stateDescriptions": {"@mobile": "Narrow screens"},
            "unknown": True,
        }
    )

    assert config == TastyConfig(
        extends="../base",
        tokens=("#a", "$gap"),
        units=False,
        states=("@mobile",),
        token_descriptions={"#a": "Accent"},
        state_descriptions={"@mobile": "Narrow screens"},
    )


def test_normalize_config_accepts_single_item_extends_list() -> None:
    config = normalize_config({"extends": ["./shared"]})

    assert config is not None
    assert config.extends == "./shared"


def test_normalize_config_rejects_non_mapping() -> None:
    assert normalize_config(["tokens"]) is None
    assert normalize_config(None) is None
