"""Built-in matchers for words, numbers, punctuation and whitespace."""

from types import MappingProxyType

from ..types import TokenType
from .matcher import PatternMatcher

# === Building blocks ===
# Letters and marks, plus zero-width joiner / word joiner so emoji
# sequences and joined scripts stay in one word.
WORD_PATTERN = r"[\p{L}\p{M}\u200D\u2060]+"
NUMBER_PATTERN = r"[\p{N}\p{Nd}\p{Nl}\p{No}]+"
WORD_OR_NUMBER_PATTERN = f"({WORD_PATTERN}|{NUMBER_PATTERN})"

# Greedy variants merge fragments joined by connectors:
#   words:   well-known, don't, rock’n’roll, 3-year, sisters’
#   numbers: 10:30, 3.14, 1,000,000
GREEDY_WORD_PATTERN = (
    f"({WORD_OR_NUMBER_PATTERN}([-'’]{WORD_PATTERN})+|{WORD_PATTERN}’?)"
)
GREEDY_NUMBER_PATTERN = f"({NUMBER_PATTERN}([:.,]?{NUMBER_PATTERN})+|{NUMBER_PATTERN})"

# Punctuation is a single character at the start of the remaining input,
# or a doubled angle bracket (<<, >>, <>) anywhere ahead of it.
PUNCTUATION_PATTERN = r"(^\p{P}|[<>]{2})"
WHITESPACE_PATTERN = r"\s+"

# === Matchers ===
word = PatternMatcher.compile(WORD_PATTERN)
number = PatternMatcher.compile(NUMBER_PATTERN)
punctuation = PatternMatcher.compile(PUNCTUATION_PATTERN)
whitespace = PatternMatcher.compile(WHITESPACE_PATTERN)
greedy_word = PatternMatcher.compile(GREEDY_WORD_PATTERN, token_type=TokenType.WORD.value)
greedy_number = PatternMatcher.compile(GREEDY_NUMBER_PATTERN, token_type=TokenType.NUMBER.value)

# Insertion order is the tie-break order.
DEFAULT_PARSERS = MappingProxyType({
    TokenType.WORD.value: word,
    TokenType.WHITESPACE.value: whitespace,
    TokenType.PUNCTUATION.value: punctuation,
    TokenType.NUMBER.value: number,
})

GREEDY_PARSERS = MappingProxyType({
    TokenType.WORD.value: greedy_word,
    TokenType.NUMBER.value: greedy_number,
})
