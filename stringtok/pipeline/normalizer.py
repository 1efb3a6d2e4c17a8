"""
Text normalization.

A normalization set is an ordered sequence of ``(pattern, replacement)``
pairs. Each rule runs on the output of the previous one.
"""

import unicodedata
from typing import Any, Sequence, Tuple

import regex


NormalizationRule = Tuple[Any, str]

# Segmentation-safe rules applied to matched tokens.
NORMALIZATIONS: Tuple[NormalizationRule, ...] = (
    (regex.compile(r"\u200B"), ""),
    (regex.compile(r"\s+"), " "),
)

# Lossy rules for comparing text, not for rebuilding it.
DESTRUCTIVE_NORMALIZATIONS: Tuple[NormalizationRule, ...] = (
    (regex.compile(r"[\u200B\u200C\u200D\u2060\uFEFF]"), ""),
    (regex.compile(r"[\u2018\u2019\u201A\u201B\u2032]"), "'"),
    (regex.compile(r"[\u201C\u201D\u201E\u201F\u2033]"), '"'),
    (regex.compile(r"[\u2010\u2011\u2012\u2013\u2014\u2015\u2212]"), "-"),
    (regex.compile(r"\s+"), " "),
)


def _compile_rule(pattern: Any) -> Any:
    if isinstance(pattern, str):
        return regex.compile(pattern)
    return pattern


def normalizer(text: str, normalizations: Sequence[NormalizationRule] = NORMALIZATIONS) -> str:
    """
    Apply an ordered normalization set to a string.

    Args:
        text: String to normalize (left unchanged)
        normalizations: ``(pattern, replacement)`` pairs; patterns may be
            strings or compiled patterns

    Returns:
        The normalized string
    """
    result = text
    for pattern, replacement in normalizations:
        result = _compile_rule(pattern).sub(replacement, result)
    return result


def normalizer_destructive(
    text: str,
    normalizations: Sequence[NormalizationRule] = DESTRUCTIVE_NORMALIZATIONS,
) -> str:
    """
    Lossy normalization for matching text regardless of typography.

    Applies NFKC, the destructive rule set, then trims and lowercases.
    Token segmentation is not preserved.
    """
    result = unicodedata.normalize("NFKC", text)
    result = normalizer(result, normalizations)
    return result.strip().lower()
