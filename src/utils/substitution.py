"""Word and suffix substitution with case restoration.

Pure helpers used by the translator service. Each replacement walks one
ordered table of (source, target) pairs; the table order is the priority
order, since later pairs see the output of earlier ones.

Case restoration is mechanical, based on exact string comparison:
    "HELLO" → upper-cased replacement
    "Hello" → replacement with its first character upper-cased
    otherwise → replacement verbatim
"""

import re
from typing import Iterable

# Characters escaped before a term is embedded in a pattern
_REGEX_SPECIAL_CHARS = re.compile(r"[-\[\]{}()*+?.,\\^$|#\s]")


def escape_regex(target: str) -> str:
    """Backslash-escape regex metacharacters and whitespace in `target`."""
    return _REGEX_SPECIAL_CHARS.sub(lambda m: "\\" + m.group(0), target)


def capitalize_first_character(target: str) -> str:
    """Upper-case the first character, leaving the rest unchanged.

    Unlike str.capitalize(), the rest of the string is not lower-cased.
    """
    return target[:1].upper() + target[1:]


def translate_whole_word(sentence: str, find: str, replace: str) -> str:
    """Replace every whole-word, case-insensitive occurrence of `find`."""
    if not find:
        return sentence
    pattern = re.compile(r"\b(" + escape_regex(find) + r")\b", re.IGNORECASE)

    def _restore_case(match: re.Match) -> str:
        found = match.group(0)
        if found == found.upper():
            return replace.upper()
        if found == capitalize_first_character(found):
            return capitalize_first_character(replace)
        return replace

    return pattern.sub(_restore_case, sentence)


def transform_suffix(sentence: str, find: str, replace: str) -> str:
    """Replace every case-insensitive occurrence of `find` at a word end.

    Only all-upper-case matches get their case restored; a capitalized match
    such as the "Ing" in "RunnIng" is replaced verbatim.
    """
    if not find:
        return sentence
    pattern = re.compile("(" + escape_regex(find) + r")\b", re.IGNORECASE)

    def _restore_case(match: re.Match) -> str:
        found = match.group(0)
        if found == found.upper():
            return replace.upper()
        # TODO: respect first-character capitalization for suffixes that form a whole word
        return replace

    return pattern.sub(_restore_case, sentence)


def _directed(pairs: Iterable[tuple[str, str]], reverse: bool) -> Iterable[tuple[str, str]]:
    if not reverse:
        return pairs
    return ((target, source) for source, target in pairs)


def replace_whole_words(
    sentence: str, words: Iterable[tuple[str, str]], reverse: bool = False,
) -> str:
    """Apply whole-word replacement for every pair, in order.

    With reverse=True each pair is applied target → source.
    """
    for find, replace in _directed(words, reverse):
        sentence = translate_whole_word(sentence, find, replace)
    return sentence


def replace_suffixes(
    sentence: str, suffixes: Iterable[tuple[str, str]], reverse: bool = False,
) -> str:
    """Apply suffix replacement for every pair, in order."""
    for find, replace in _directed(suffixes, reverse):
        sentence = transform_suffix(sentence, find, replace)
    return sentence
