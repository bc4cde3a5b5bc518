import pytest

from tastypy.lexer import Token, TokenKind, is_state_key, is_sub_element, significant, tokenize_state_key


def lex(text: str, aliases: tuple[str, ...] = ()) -> list[tuple[TokenKind, str]]:
    return [(token.kind, token.text) for token in significant(tokenize_state_key(text, aliases))]


def only(text: str, aliases: tuple[str, ...] = ()) -> Token:
    tokens = significant(tokenize_state_key(text, aliases))
    assert len(tokens) == 1
    return tokens[0]


def test_empty_key_is_default_state() -> None:
    tokens = tokenize_state_key("")

    assert len(tokens) == 1
    assert tokens[0].kind == TokenKind.DEFAULT_STATE
    assert (tokens[0].start, tokens[0].end) == (0, 0)


def test_blank_key_is_one_default_state_spanning_input() -> None:
    tokens = tokenize_state_key("   ")

    assert [(t.kind, t.start, t.end) for t in tokens] == [(TokenKind.DEFAULT_STATE, 0, 3)]


def test_logical_operators_are_flat() -> None:
    assert lex("hovered & !disabled") == [
        (TokenKind.BOOLEAN_MOD, "hovered"),
        (TokenKind.STATE_OPERATOR, "&"),
        (TokenKind.STATE_OPERATOR, "!"),
        (TokenKind.BOOLEAN_MOD, "disabled"),
    ]


def test_grouping_parentheses_are_punctuation() -> None:
    assert lex("(hovered | focused) ^ pressed") == [
        (TokenKind.PUNCTUATION, "("),
        (TokenKind.BOOLEAN_MOD, "hovered"),
        (TokenKind.STATE_OPERATOR, "|"),
        (TokenKind.BOOLEAN_MOD, "focused"),
        (TokenKind.PUNCTUATION, ")"),
        (TokenKind.STATE_OPERATOR, "^"),
        (TokenKind.BOOLEAN_MOD, "pressed"),
    ]


def test_value_modifiers() -> None:
    assert lex('theme=danger & size="x large"') == [
        (TokenKind.VALUE_MOD, "theme=danger"),
        (TokenKind.STATE_OPERATOR, "&"),
        (TokenKind.VALUE_MOD, 'size="x large"'),
    ]


def test_has_pseudo_class_tokenizes_selector_body() -> None:
    token = only(":has(Body > Row)")

    assert token.kind == TokenKind.PSEUDO_CLASS
    assert token.text == ":has(Body > Row)"
    assert [(t.kind, t.text, t.start) for t in token.children] == [
        (TokenKind.SUB_ELEMENT, "Body", 5),
        (TokenKind.STATE_OPERATOR, ">", 10),
        (TokenKind.SUB_ELEMENT, "Row", 12),
    ]


def test_selector_body_classifies_lowercase_and_selectors() -> None:
    token = only(":not(disabled, .active, [aria-busy], :hover)")

    assert [(t.kind, t.text) for t in token.children] == [
        (TokenKind.BOOLEAN_MOD, "disabled"),
        (TokenKind.PUNCTUATION, ","),
        (TokenKind.CLASS_SELECTOR, ".active"),
        (TokenKind.PUNCTUATION, ","),
        (TokenKind.ATTR_SELECTOR, "[aria-busy]"),
        (TokenKind.PUNCTUATION, ","),
        (TokenKind.PSEUDO_CLASS, ":hover"),
    ]


def test_other_functional_pseudo_classes_are_opaque() -> None:
    token = only(":nth-child(2n+1)")

    assert token.kind == TokenKind.PSEUDO_CLASS
    assert token.text == ":nth-child(2n+1)"
    assert token.children == ()


def test_selectors() -> None:
    assert lex('::before .active [aria-expanded="true"]') == [
        (TokenKind.PSEUDO_CLASS, "::before"),
        (TokenKind.CLASS_SELECTOR, ".active"),
        (TokenKind.ATTR_SELECTOR, '[aria-expanded="true"]'),
    ]


def test_media_state_body() -> None:
    token = only("@media(w < 768px)")

    assert token.kind == TokenKind.MEDIA_STATE
    assert [(t.kind, t.text) for t in token.children] == [
        (TokenKind.IDENTIFIER, "w"),
        (TokenKind.STATE_OPERATOR, "<"),
        (TokenKind.CSS_UNIT, "768px"),
    ]


def test_container_state_shorthand() -> None:
    token = only("@(card, w >= 400px)")

    assert token.kind == TokenKind.CONTAINER_STATE
    assert [(t.kind, t.text) for t in token.children] == [
        (TokenKind.BOOLEAN_MOD, "card"),
        (TokenKind.PUNCTUATION, ","),
        (TokenKind.BOOLEAN_MOD, "w"),
        (TokenKind.STATE_OPERATOR, ">="),
        (TokenKind.CSS_UNIT, "400px"),
    ]


def test_root_and_own_states_use_modifiers() -> None:
    root = only("@root(theme=dark)")
    own = only("@own(hovered)")

    assert root.kind == TokenKind.ROOT_STATE
    assert [(t.kind, t.text) for t in root.children] == [(TokenKind.VALUE_MOD, "theme=dark")]
    assert own.kind == TokenKind.OWN_STATE
    assert [(t.kind, t.text) for t in own.children] == [(TokenKind.BOOLEAN_MOD, "hovered")]


@pytest.mark.parametrize(
    ("key", "kind"),
    [
        ("@starting", TokenKind.STARTING_STATE),
        ("@keyframes", TokenKind.AT_RULE),
        ("@properties", TokenKind.AT_RULE),
        ("@supports", TokenKind.SUPPORTS_STATE),
        ("@mobile", TokenKind.STATE_ALIAS),
    ],
)
def test_at_keywords(key: str, kind: TokenKind) -> None:
    assert only(key).kind == kind


def test_alias_match_wins_over_keyword() -> None:
    assert only("@media", ("@media",)).kind == TokenKind.STATE_ALIAS


def test_unrecognized_character_is_unknown() -> None:
    assert lex("hovered & 1") == [
        (TokenKind.BOOLEAN_MOD, "hovered"),
        (TokenKind.STATE_OPERATOR, "&"),
        (TokenKind.UNKNOWN, "1"),
    ]


def test_is_state_key() -> None:
    assert is_state_key("")
    assert is_state_key("hovered")
    assert is_state_key("theme=dark")
    assert is_state_key(":hover")
    assert is_state_key("@mobile")
    assert is_state_key("Hovered & Pressed")
    assert not is_state_key("fontSize")
    assert not is_state_key("Title")
    assert not is_state_key("#primary")


def test_is_sub_element() -> None:
    assert is_sub_element("Title")
    assert not is_sub_element("title")
    assert not is_sub_element("")
    assert not is_sub_element("$gap")
