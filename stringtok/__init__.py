"""
stringtok - configurable lexical tokenizer.

Splits text into word, number, punctuation, whitespace and unknown tokens
using independently defined pattern matchers.

Quick Start:
    >>> from stringtok import tokenize
    >>> tokenize(text="Hello, world!")
    ['Hello', 'world']

For raw segmentation:
    >>> from stringtok import classify_tokens
    >>> [t.type for t in classify_tokens("Hi there")]
    ['word', 'whitespace', 'word']
"""

__version__ = "0.1.0"

from .tokenizer import tokenize, annotate_occurrences
from .scanner import classify_tokens, token_offsets
from .config import TokenizerConfig
from .types import Token, TokenType, MatchResult, Segment
from .patterns import (
    PatternMatcher,
    DEFAULT_PARSERS,
    word,
    number,
    punctuation,
    whitespace,
    greedy_word,
    greedy_number,
)
from .pipeline import (
    normalizer,
    normalizer_destructive,
    NORMALIZATIONS,
    DESTRUCTIVE_NORMALIZATIONS,
    occurrence_in_string,
    occurrences_in_string,
    selection_array,
    selections_to_ranges,
    splice_string_on_ranges,
)
from .exceptions import (
    StringtokError,
    InvalidInputError,
    MatcherConfigurationError,
    InternalInvariantError,
)

__all__ = [
    # Version
    "__version__",
    # Main API
    "tokenize",
    "classify_tokens",
    "annotate_occurrences",
    "token_offsets",
    "TokenizerConfig",
    # Types
    "Token",
    "TokenType",
    "MatchResult",
    "Segment",
    # Matchers
    "PatternMatcher",
    "DEFAULT_PARSERS",
    "word",
    "number",
    "punctuation",
    "whitespace",
    "greedy_word",
    "greedy_number",
    # Normalization
    "normalizer",
    "normalizer_destructive",
    "NORMALIZATIONS",
    "DESTRUCTIVE_NORMALIZATIONS",
    # Text helpers
    "occurrence_in_string",
    "occurrences_in_string",
    "selection_array",
    "selections_to_ranges",
    "splice_string_on_ranges",
    # Exceptions
    "StringtokError",
    "InvalidInputError",
    "MatcherConfigurationError",
    "InternalInvariantError",
]
