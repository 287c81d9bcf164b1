#!/usr/bin/env python
"""Command-line translator.

Usage:
    doggo-translate "Hello friend"
    doggo-translate --reverse "Bark fren"
    doggo-translate --map my-map.json "Hello there"
    echo "Hello friend" | doggo-translate
    doggo-translate --list-languages
"""

import argparse
import json
import logging
import sys
from typing import TextIO

from domain.model.errors import ConfigurationError, ValidationError
from domain.model.language import DEFAULT_LANGUAGE, TokensCatalog
from domain.model.translation import TranslationMap, TranslatorConfig
from services.translator_service import DoggoTranslator
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doggo-translate",
        description="Translate sentences with a word/suffix substitution map",
    )
    parser.add_argument("sentences", nargs="*", help="Sentences to translate (default: read stdin)")
    parser.add_argument("--reverse", action="store_true", help="Translate target → source")
    parser.add_argument(
        "--language", default=DEFAULT_LANGUAGE.value,
        help=f"Bundled language token (default: {DEFAULT_LANGUAGE.value})",
    )
    parser.add_argument("--map", dest="map_path", help="JSON file with a custom {words, suffixes} map")
    parser.add_argument("--list-languages", action="store_true", help="Print language tokens and exit")
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    return parser


def load_user_map(path: str) -> TranslationMap:
    """Read a custom translation map from a JSON file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read translation map {path}: {e}") from e
    return TranslationMap.from_dict(data)


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    setup_structured_logging(args.log_level)

    if args.list_languages:
        for token in TokensCatalog.get_all_language_tokens():
            print(token, file=stdout)
        return 0

    try:
        user_map = load_user_map(args.map_path) if args.map_path else None
        translator = DoggoTranslator(
            TranslatorConfig(language_token=args.language, user_translations_map=user_map)
        )
    except ValidationError as e:
        logger.error("Invalid translator configuration: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    sentences = args.sentences or (line.rstrip("\n") for line in stdin)
    for sentence in sentences:
        print(translator.translate_sentence(sentence, reverse=args.reverse), file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
