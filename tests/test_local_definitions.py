from tastypy.analysis import build_style_source, collect_local_definitions, is_alias_definition
from tastypy.text import TextRange


def test_collects_tokens_and_state_aliases_file_wide() -> None:
    source = build_style_source(
        {
            "#brand": "#purple",
            "$gap": "8px",
            "@mobile": "@media(w < 768px)",
            "Title": {"$title-gap": "2x", "&::before": {"##glow": "#white"}},
            "@properties": {"$rotation": "{ syntax: '<angle>' }", "#halo": "{}"},
            "@keyframes": {"fade": {"#ghost": "1"}},
            "padding": {"": "1x", "hovered": {"@compact": "@media(w < 400px)"}},
            "$": ">Body>",
        }
    )

    definitions = collect_local_definitions(source.forest)

    assert definitions.tokens == {"#brand", "$gap", "$title-gap", "##glow", "$rotation", "#halo"}
    assert definitions.states == {"@mobile", "@compact"}
    assert definitions.has_token("$gap")
    assert not definitions.has_token("#ghost")
    assert not definitions.has_token("$")
    assert definitions.has_state("@compact")


def test_records_first_definition_location() -> None:
    source = build_style_source({"#brand": "#purple", "Title": {"#brand": "#blue"}})

    definitions = collect_local_definitions(source.forest)

    assert definitions.token_locations["#brand"] == TextRange(2, 8)
    assert source.text[2:8] == "#brand"


def test_state_alias_location_points_at_key() -> None:
    source = build_style_source({"fill": {"@state": ":hover"}})

    definitions = collect_local_definitions(source.forest)

    location = definitions.state_locations["@state"]
    assert source.text[location.start : location.end] == "@state"


def test_collects_across_every_style_object() -> None:
    first = build_style_source({"$gap": "8px"})
    second = build_style_source({"@dark": "@root(theme=dark)"})

    definitions = collect_local_definitions([first.root, second.root])

    assert definitions.tokens == {"$gap"}
    assert definitions.states == {"@dark"}


def test_state_keys_are_usages_not_definitions() -> None:
    source = build_style_source({"color": {"hovered": "#red", ":focus": {"theme=dark": "#blue"}}})

    definitions = collect_local_definitions(source.forest)

    assert definitions.states == set()
    assert definitions.tokens == set()


def test_alias_definition_needs_a_bare_name_and_a_state_key_body() -> None:
    assert is_alias_definition("@compact", "@media(w < 400px)")
    assert is_alias_definition("@state", ":hover")
    assert not is_alias_definition("@mobile", "1x")
    assert not is_alias_definition("@mobile", "#red")
    assert not is_alias_definition("@own(hovered)", ":hover")
    assert not is_alias_definition("@starting", "hidden")
    assert not is_alias_definition("@mobile", "")
