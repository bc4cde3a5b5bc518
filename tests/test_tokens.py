from tastypy.builtins import ALL_STYLE_PROPERTIES, BUILT_IN_UNITS, PSEUDO_ELEMENTS, unit_description
from tastypy.lexer import Token, TokenKind, collect_tokens, dump_tokens, tokenize_state_key, tokenize_value, visit_tokens


def test_token_name_strips_arguments_and_opacity() -> None:
    call, _, color = tokenize_value("calc(1x) #purple.5")

    assert call.name == "calc"
    assert color.name == "#purple"
    assert Token(TokenKind.IDENTIFIER, "auto", 0, 4).name == "auto"


def test_shifted_rebases_children() -> None:
    (call,) = tokenize_value("min(2x)")

    moved = call.shifted(10)

    assert moved.range.as_tuple() == (10, 17)
    assert moved.children[0].range.as_tuple() == (14, 16)
    assert call.shifted(0) is call


def test_visit_tokens_reports_depth_parents_first() -> None:
    seen: list[tuple[str, int]] = []

    visit_tokens(tokenize_value("max(1x, calc(2r))"), lambda token, depth: seen.append((token.text, depth)))

    assert seen[0] == ("max(1x, calc(2r))", 0)
    assert ("calc(2r)", 1) in seen
    assert ("2r", 2) in seen


def test_collect_tokens_descends_into_children() -> None:
    tokens = tokenize_value("#a calc(#b + #c)")

    colors = collect_tokens(tokens, lambda token: token.kind == TokenKind.COLOR_TOKEN)

    assert [token.text for token in colors] == ["#a", "#b", "#c"]


def test_at_state_kinds() -> None:
    kinds = [token.kind for token in tokenize_state_key("@media(w > 1px) @starting @mobile")]

    assert TokenKind.MEDIA_STATE.is_at_state
    assert TokenKind.STARTING_STATE.is_at_state
    assert not TokenKind.STATE_ALIAS.is_at_state
    assert TokenKind.WHITESPACE.is_trivia
    assert kinds.count(TokenKind.WHITESPACE) == 2


def test_dump_tokens_prints_tree(capsys) -> None:
    dump_tokens(tokenize_value("calc(1x)"))

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("000 FUNCTION")
    assert "range=(5, 7)" in lines[1]
    assert lines[1].split()[1] == "CUSTOM_UNIT"


def test_builtin_tables() -> None:
    assert "padding" in ALL_STYLE_PROPERTIES
    assert "$" in ALL_STYLE_PROPERTIES
    assert "before" in PSEUDO_ELEMENTS
    assert all(unit_description(unit) != "custom unit" for unit in BUILT_IN_UNITS)
    assert unit_description("cols") == "custom unit"
