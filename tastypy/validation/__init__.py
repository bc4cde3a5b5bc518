"""Value and state-key validation."""

from tastypy.validation.runner import validate_document
from tastypy.validation.states import (
    StateContext,
    StateRule,
    check_bracket_balance,
    default_state_rules,
    validate_state_key,
    validate_state_rules,
    validate_state_tokens,
)
from tastypy.validation.suggest import DEFAULT_MAX_DISTANCE, find_similar, levenshtein_distance
from tastypy.validation.values import (
    ValueContext,
    ValueRule,
    default_value_rules,
    validate_value,
    validate_value_rules,
    validate_value_tokens,
)

__all__ = [
    "DEFAULT_MAX_DISTANCE",
    "StateContext",
    "StateRule",
    "ValueContext",
    "ValueRule",
    "check_bracket_balance",
    "default_state_rules",
    "default_value_rules",
    "find_similar",
    "levenshtein_distance",
    "validate_document",
    "validate_state_key",
    "validate_state_rules",
    "validate_state_tokens",
    "validate_value",
    "validate_value_rules",
    "validate_value_tokens",
]
