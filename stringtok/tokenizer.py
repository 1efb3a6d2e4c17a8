"""
Tokenizer pipeline.

Wraps the scanner with a TokenizerConfig: picks the matcher set, scans,
filters to the enabled token types, optionally annotates occurrences and
projects the result to plain strings or Token records.

Usage:
    >>> from stringtok import tokenize
    >>> tokenize(text="Hello, world!")
    ['Hello', 'world']
    >>> tokenize(text="well-known", greedy=True)
    ['well-known']
"""

import logging
from collections import Counter
from dataclasses import fields
from typing import Any, Dict, List, Sequence, Union

from .config import TokenizerConfig
from .exceptions import InvalidInputError
from .scanner import classify_tokens
from .types import Token

logger = logging.getLogger(__name__)

ConfigLike = Union[TokenizerConfig, Dict[str, Any], str, None]


def annotate_occurrences(tokens: Sequence[Token]) -> List[Token]:
    """
    Attach occurrence numbers to each token by text equality.

    ``occurrences`` is how many tokens share the text; ``occurrence`` is the
    1-based position among them in stream order.
    """
    totals = Counter(token.text for token in tokens)
    seen: Counter = Counter()
    annotated = []
    for token in tokens:
        seen[token.text] += 1
        annotated.append(token.with_occurrence(seen[token.text], totals[token.text]))
    return annotated


def _resolve_config(config: ConfigLike, options: Dict[str, Any]) -> TokenizerConfig:
    if config is None:
        return TokenizerConfig.from_dict(options)
    if isinstance(config, str):
        return TokenizerConfig.from_dict({**options, "text": config})
    if isinstance(config, dict):
        return TokenizerConfig.from_dict({**config, **options})
    if isinstance(config, TokenizerConfig):
        if not options:
            return config
        current = {f.name: getattr(config, f.name) for f in fields(config)}
        return TokenizerConfig.from_dict({**current, **options})
    raise InvalidInputError(
        f"tokenize() expects a TokenizerConfig, dict or str, got {type(config).__name__}",
        field="config",
    )


def tokenize(config: ConfigLike = None, **options: Any) -> Union[List[str], List[Token]]:
    """
    Tokenize text into words, numbers, punctuation and whitespace.

    Args:
        config: TokenizerConfig, options dict, or the text itself
        **options: TokenizerConfig fields; override ``config``

    Returns:
        Plain token strings, or Token records when ``verbose`` or
        ``occurrences`` is set. Without ``verbose`` the records carry no
        sub-matches.

    Raises:
        InvalidInputError: text or an option has the wrong type
        MatcherConfigurationError: an enabled type has no matcher
    """
    config = _resolve_config(config, options)
    if not config.text:
        return []

    tokens = classify_tokens(
        config.text,
        config.active_parsers(),
        config.default_type,
        config.normalize,
        config.normalizations,
    )

    enabled = config.enabled_types()
    filtered = [token for token in tokens if token.type in enabled]
    logger.debug(f"Kept {len(filtered)} of {len(tokens)} tokens for types {enabled}")

    if config.occurrences:
        filtered = annotate_occurrences(filtered)

    if config.verbose:
        return filtered
    if config.occurrences:
        return [Token(t.text, t.type, (), t.occurrence, t.occurrences) for t in filtered]
    return [token.text for token in filtered]
