"""Pattern matchers used by the scanner."""

from .matcher import PatternMatcher, as_matcher, matcher_items
from .definitions import (
    DEFAULT_PARSERS,
    GREEDY_PARSERS,
    word,
    number,
    punctuation,
    whitespace,
    greedy_word,
    greedy_number,
)

__all__ = [
    "PatternMatcher",
    "as_matcher",
    "matcher_items",
    "DEFAULT_PARSERS",
    "GREEDY_PARSERS",
    "word",
    "number",
    "punctuation",
    "whitespace",
    "greedy_word",
    "greedy_number",
]
