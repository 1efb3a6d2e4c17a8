"""
Multi-pattern scanner.

Splits a string into typed tokens. At each step every matcher searches the
input remaining after the cursor; the match starting earliest wins, text
skipped before it becomes a default-typed token, and the cursor moves past the
match. On equal start offsets the matcher listed first wins.

Concatenating the text of the returned tokens rebuilds the input exactly,
unless normalization rewrote matched tokens. Normalization never changes how
far the cursor advances.
"""

import logging
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from .exceptions import InternalInvariantError, InvalidInputError
from .patterns.definitions import DEFAULT_PARSERS
from .patterns.matcher import MatcherSet, PatternMatcher, matcher_items
from .pipeline.normalizer import NORMALIZATIONS, NormalizationRule, normalizer
from .types import MatchResult, Token, TokenType

logger = logging.getLogger(__name__)

DEFAULT_TYPE = TokenType.UNKNOWN.value


def coerce_text(text: object) -> str:
    """Treat None as empty text; reject anything else that is not a str."""
    if text is None:
        return ""
    if not isinstance(text, str):
        raise InvalidInputError(
            f"Text to tokenize must be a str, got {type(text).__name__}",
            field="text",
        )
    return text


def _earliest_match(
    text: str,
    pos: int,
    items: Sequence[Tuple[str, PatternMatcher]],
) -> Tuple[Optional[str], Optional[PatternMatcher], Optional[MatchResult]]:
    """Pick the matcher whose hit starts first; earlier entries win ties."""
    best_name, best_matcher, best = None, None, None
    for name, matcher in items:
        match = matcher.search(text, pos)
        if match is None:
            continue
        if best is None or match.start < best.start:
            best_name, best_matcher, best = name, matcher, match
    return best_name, best_matcher, best


def _scan(
    text: str,
    items: Sequence[Tuple[str, PatternMatcher]],
    default_type: str,
    normalizations: Optional[Sequence[NormalizationRule]],
) -> Iterator[Token]:
    pos = 0
    length = len(text)
    # Each step consumes at least one character
    max_steps = length + 1
    steps = 0

    while pos < length:
        steps += 1
        if steps > max_steps:
            raise InternalInvariantError(
                "Scanner did not advance", {"position": pos, "steps": steps}
            )

        name, matcher, match = _earliest_match(text, pos, items)
        gap_end = match.start if match is not None else length

        if gap_end > pos:
            yield Token(text[pos:gap_end], default_type)

        if match is None:
            pos = gap_end
            continue

        token_text = match.text
        if normalizations is not None:
            token_text = normalizer(token_text, normalizations)
        yield Token(token_text, matcher.token_type or name, match.groups)
        pos = match.end


def classify_tokens(
    text: Optional[str],
    parsers: MatcherSet = DEFAULT_PARSERS,
    default_type: Optional[str] = None,
    normalize: bool = False,
    normalizations: Sequence[NormalizationRule] = NORMALIZATIONS,
) -> Tuple[Token, ...]:
    """
    Scan ``text`` into an unfiltered token stream.

    Args:
        text: String to scan; None is treated as empty
        parsers: Mapping or ordered ``(name, matcher)`` pairs. Names become
            token types unless the matcher sets its own.
        default_type: Type for text no matcher covers (default "unknown")
        normalize: Rewrite matched token text with ``normalizations``
        normalizations: Ordered ``(pattern, replacement)`` rules

    Returns:
        Tokens in source order

    Raises:
        InvalidInputError: text is not a str
        MatcherConfigurationError: parsers cannot be used as matchers
    """
    text = coerce_text(text)
    if not text:
        return ()

    items = matcher_items(parsers)
    tokens = tuple(
        _scan(
            text,
            items,
            default_type or DEFAULT_TYPE,
            normalizations if normalize else None,
        )
    )
    logger.debug(f"Scanned {len(text)} chars into {len(tokens)} tokens")
    return tokens


def token_offsets(tokens: Iterable[Token]) -> Iterator[Tuple[int, int]]:
    """
    Yield ``(start, end)`` offsets for each token by accumulating lengths.

    Only meaningful for streams that were not normalized.
    """
    start = 0
    for token in tokens:
        end = start + len(token.text)
        yield start, end
        start = end
