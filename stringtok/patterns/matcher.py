"""Pattern matcher wrapper and matcher-set coercion."""

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

import regex

from ..exceptions import MatcherConfigurationError
from ..types import MatchResult

logger = logging.getLogger(__name__)

# Flags used for every pattern compiled from a string
REGEX_FLAGS = regex.VERSION1 | regex.UNICODE


@dataclass(frozen=True)
class PatternMatcher:
    """
    Stateless regex matcher.

    Each search runs on the remaining input (``text[pos:]``), so ``^`` and
    ``\\b`` see the cursor as the start of the string. Offsets are reported
    relative to the full input.

    Zero-length matches count as no match for the whole step: the regex
    engine stops at the first (empty) hit, so a pattern like ``\\d*`` that
    matches empty at the cursor does not go on to find digits further
    ahead. Write matchers that cannot match the empty string.

    Args:
        pattern: Compiled ``regex`` (or ``re``) pattern
        token_type: Type reported for matches; defaults to the name the
            matcher is registered under
    """

    pattern: Any
    token_type: Optional[str] = None

    @classmethod
    def compile(cls, pattern: str, token_type: Optional[str] = None, flags: int = 0) -> "PatternMatcher":
        """Compile a pattern string with the ``regex`` engine."""
        try:
            compiled = regex.compile(pattern, REGEX_FLAGS | flags)
        except regex.error as e:
            raise MatcherConfigurationError(
                f"Invalid matcher pattern {pattern!r}: {e}", matcher=token_type
            ) from e
        return cls(compiled, token_type)

    def search(self, text: str, pos: int = 0) -> Optional[MatchResult]:
        """
        Find the leftmost match in the input remaining after ``pos``.

        Args:
            text: Full input string
            pos: Cursor position; the pattern sees ``text[pos:]``

        Returns:
            MatchResult with an absolute start offset, or None
        """
        remaining = text[pos:] if pos else text
        match = self.pattern.search(remaining)
        if match is None or match.end() == match.start():
            return None
        return MatchResult(start=pos + match.start(), text=match.group(0), groups=match.groups())


def as_matcher(value: Any, name: Optional[str] = None) -> PatternMatcher:
    """
    Coerce a matcher-like value into a PatternMatcher.

    Accepts PatternMatcher instances, compiled ``regex``/``re`` patterns and
    pattern strings.
    """
    if isinstance(value, PatternMatcher):
        return value
    if isinstance(value, (regex.Pattern, re.Pattern)):
        return PatternMatcher(value)
    if isinstance(value, str):
        return PatternMatcher.compile(value)
    raise MatcherConfigurationError(
        f"Matcher {name!r} must be a pattern or PatternMatcher, got {type(value).__name__}",
        matcher=name,
    )


MatcherSet = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def matcher_items(parsers: MatcherSet) -> Tuple[Tuple[str, PatternMatcher], ...]:
    """
    Normalize a matcher set into an ordered tuple of ``(name, matcher)`` pairs.

    Order is the tie-break order used by the scanner: when two matchers hit
    at the same offset, the earlier pair wins.
    """
    if parsers is None:
        raise MatcherConfigurationError("Matcher set is required")

    pairs = parsers.items() if isinstance(parsers, Mapping) else parsers

    items = []
    seen = set()
    try:
        for name, value in pairs:
            if not isinstance(name, str) or not name:
                raise MatcherConfigurationError(f"Matcher name must be a non-empty string, got {name!r}")
            if name in seen:
                raise MatcherConfigurationError(f"Duplicate matcher name {name!r}", matcher=name)
            seen.add(name)
            items.append((name, as_matcher(value, name)))
    except (TypeError, ValueError) as e:
        raise MatcherConfigurationError(f"Matcher set must be a mapping or (name, matcher) pairs: {e}") from e

    logger.debug(f"Matcher set resolved: {[name for name, _ in items]}")
    return tuple(items)
