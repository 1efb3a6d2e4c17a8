"""Configuration for the stringtok tokenizer."""

import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging

from .exceptions import InvalidInputError, MatcherConfigurationError
from .patterns.definitions import DEFAULT_PARSERS, GREEDY_PARSERS
from .patterns.matcher import MatcherSet, PatternMatcher, matcher_items
from .pipeline.normalizer import NORMALIZATIONS, NormalizationRule
from .scanner import DEFAULT_TYPE, coerce_text
from .types import TokenType

logger = logging.getLogger(__name__)

ENV_PREFIX = "STRINGTOK_"

# Boolean options, in the order include flags build the type filter
FLAG_FIELDS = (
    "include_words",
    "include_numbers",
    "include_whitespace",
    "include_punctuation",
    "greedy",
    "verbose",
    "occurrences",
    "normalize",
)

INCLUDE_TYPES = (
    ("include_words", TokenType.WORD.value),
    ("include_numbers", TokenType.NUMBER.value),
    ("include_whitespace", TokenType.WHITESPACE.value),
    ("include_punctuation", TokenType.PUNCTUATION.value),
)

_TRUE_VALUES = ("1", "true", "yes")
_FALSE_VALUES = ("0", "false", "no")


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidInputError(
        f"Invalid value {raw!r} for {name}. Must be one of: "
        f"{', '.join(_TRUE_VALUES + _FALSE_VALUES)}",
        field=name,
    )


@dataclass
class TokenizerConfig:
    """Options for a single ``tokenize`` call."""

    text: Optional[str] = ""

    # Type filter
    include_words: bool = True
    include_numbers: bool = True
    include_punctuation: bool = False
    include_whitespace: bool = False

    # Matching
    greedy: bool = False
    parsers: MatcherSet = field(default_factory=lambda: DEFAULT_PARSERS, repr=False)
    default_type: str = DEFAULT_TYPE

    # Output
    verbose: bool = False
    occurrences: bool = False

    # Normalization of matched tokens
    normalize: bool = False
    normalizations: Sequence[NormalizationRule] = field(default=NORMALIZATIONS, repr=False)

    def __post_init__(self):
        """Validate configuration values."""
        self.text = coerce_text(self.text)

        for name in FLAG_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidInputError(
                    f"{name} must be a bool, got {type(value).__name__}", field=name
                )

        if not isinstance(self.default_type, str) or not self.default_type:
            raise InvalidInputError("default_type must be a non-empty string", field="default_type")

        if self.normalizations is None:
            raise InvalidInputError("normalizations must be a sequence of rules", field="normalizations")

    def enabled_types(self) -> List[str]:
        """Token types that survive filtering."""
        return [token_type for flag, token_type in INCLUDE_TYPES if getattr(self, flag)]

    def active_parsers(self) -> Tuple[Tuple[str, PatternMatcher], ...]:
        """
        Ordered matchers for this call, after greedy substitution.

        Raises:
            MatcherConfigurationError: an enabled type has no matcher
        """
        items = list(matcher_items(self.parsers))

        if self.greedy:
            positions = {name: i for i, (name, _) in enumerate(items)}
            for name, matcher in GREEDY_PARSERS.items():
                if name in positions:
                    items[positions[name]] = (name, matcher)
                else:
                    items.append((name, matcher))

        produced = {matcher.token_type or name for name, matcher in items}
        for flag, token_type in INCLUDE_TYPES:
            if getattr(self, flag) and token_type not in produced:
                raise MatcherConfigurationError(
                    f"{flag} is set but no {token_type!r} matcher is configured",
                    matcher=token_type,
                )

        return tuple(items)

    @classmethod
    def from_dict(cls, options: Dict[str, Any]) -> "TokenizerConfig":
        """Create config from a plain dict, rejecting unknown options."""
        if not isinstance(options, dict):
            raise InvalidInputError(
                f"Options must be a dict, got {type(options).__name__}", field="options"
            )
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise InvalidInputError(
                f"Unknown tokenizer options: {', '.join(unknown)}", field=unknown[0]
            )
        return cls(**options)

    @classmethod
    def from_env(cls, **overrides: Any) -> "TokenizerConfig":
        """
        Create config with defaults read from environment variables.

        ``STRINGTOK_<FLAG>`` sets a boolean option (e.g. STRINGTOK_GREEDY=1)
        and ``STRINGTOK_DEFAULT_TYPE`` the gap type. Keyword overrides win.
        """
        options: Dict[str, Any] = {}

        for name in FLAG_FIELDS:
            env_name = ENV_PREFIX + name.upper()
            if env_value := os.environ.get(env_name):
                options[name] = _parse_flag(env_name, env_value)

        if env_type := os.environ.get(ENV_PREFIX + "DEFAULT_TYPE"):
            options["default_type"] = env_type

        if options:
            logger.debug(f"Tokenizer options from environment: {sorted(options)}")

        options.update(overrides)
        return cls.from_dict(options)
