#!/usr/bin/env python
import argparse

from tastypy.lexer import (
    AffixToken,
    dump_tokens,
    selector_affix_token,
    tokenize_selector_affix,
    tokenize_state_key,
    tokenize_value,
)


def format_affix_token(idx: int, token: AffixToken) -> str:
    return f"{idx:03d} {token.kind.name:<20} range={token.range.as_tuple()} text={token.text!r}"


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the token tree of a tasty value, state key or selector affix.")
    parser.add_argument("text", help="text to tokenize")
    parser.add_argument(
        "--mode",
        choices=("value", "state", "affix"),
        default="value",
        help="grammar to tokenize with (default: value)",
    )
    parser.add_argument("--token", action="append", default=[], help="configured token name, e.g. '#primary'")
    parser.add_argument("--unit", action="append", default=[], help="configured custom unit")
    parser.add_argument("--preset", action="append", default=[], help="configured preset")
    parser.add_argument("--state", action="append", default=[], help="configured state alias, e.g. '@mobile'")
    args = parser.parse_args()

    if args.mode == "value":
        dump_tokens(tokenize_value(args.text, tokens=args.token or False, units=args.unit, presets=args.preset))
    elif args.mode == "state":
        dump_tokens(tokenize_state_key(args.text, args.state))
    else:
        dump_tokens([selector_affix_token(args.text)])
        for idx, token in enumerate(tokenize_selector_affix(args.text)):
            print(format_affix_token(idx, token))


if __name__ == "__main__":
    main()
