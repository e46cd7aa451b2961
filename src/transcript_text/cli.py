"""CLI for word merging and real-number parsing."""

import argparse
import sys
from typing import List, Optional

from transcript_text.config import LANGUAGES, TextConfig
from transcript_text.errors import ConfigError
from transcript_text.logging_utils import setup_logging
from transcript_text.numbers import convert_string_to_real, split_string_to_floats
from transcript_text.words import iter_merged_words


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transcript-text",
        description="Merge character-level ASR tokens into words; parse reals",
    )
    parser.add_argument(
        "--dtype",
        choices=("float32", "float64"),
        default="float32",
        help="Float width for parsed reals (default: float32)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level name, e.g. DEBUG (default: LOG_LEVEL env or INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    merge = sub.add_parser("merge", help="Merge tokens into words, one entry per output line")
    source = merge.add_mutually_exclusive_group()
    # default=[] keeps an empty positional from counting as "given"
    source.add_argument("tokens", nargs="*", default=[], help="Tokens in emission order")
    source.add_argument(
        "--stdin",
        action="store_true",
        help="Read tokens from stdin, one per line",
    )
    merge.add_argument(
        "--hex",
        action="store_true",
        help="Tokens are hex-encoded bytes (e.g. c3b6 for the umlaut o); output is hex too",
    )
    merge.add_argument(
        "--languages",
        default=",".join(LANGUAGES),
        help=f"Comma-separated diacritic tables (default: {','.join(LANGUAGES)})",
    )

    real = sub.add_parser("parse-real", help="Parse a single real value")
    real.add_argument("text")

    reals = sub.add_parser("parse-reals", help="Parse a delimited list of reals")
    reals.add_argument("text")
    reals.add_argument(
        "--delimiters",
        default=TextConfig.delimiters,
        help=f"Delimiter characters (default: {TextConfig.delimiters!r})",
    )
    reals.add_argument(
        "--omit-empty",
        action="store_true",
        help="Skip empty fields",
    )
    return parser


def _read_tokens(args: argparse.Namespace) -> List[bytes]:
    if args.stdin:
        raw = [line.rstrip("\r\n") for line in sys.stdin]
    else:
        raw = list(args.tokens)
    if args.hex:
        return [bytes.fromhex(t) for t in raw]
    return [t.encode("utf-8") for t in raw]


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "merge":
        languages = tuple(name.strip() for name in args.languages.split(",") if name.strip())
        try:
            config = TextConfig(languages=languages)
        except ConfigError as e:
            print(str(e), file=sys.stderr)
            sys.exit(2)
        try:
            tokens = _read_tokens(args)
        except ValueError as e:
            print(f"Invalid hex token: {e}", file=sys.stderr)
            sys.exit(2)
        for word in iter_merged_words(tokens, config.diacritic_kinds):
            print(word.hex() if args.hex else word.decode("utf-8", errors="replace"))
        return

    config = TextConfig(float_dtype=args.dtype)

    if args.command == "parse-real":
        result = convert_string_to_real(args.text, config.numpy_dtype)
        if not result:
            print(result.reason, file=sys.stderr)
            sys.exit(1)
        print(result.value)
        return

    result = split_string_to_floats(
        args.text,
        args.delimiters,
        omit_empty_strings=args.omit_empty,
        dtype=config.numpy_dtype,
    )
    if not result:
        print(result.reason, file=sys.stderr)
        sys.exit(1)
    for value in result.value:
        print(value)


if __name__ == "__main__":
    main()
