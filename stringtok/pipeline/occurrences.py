"""Occurrence counting over raw text and over token streams."""

from typing import Sequence

from ..types import Token


def occurrences_in_string(haystack: str, needle: str) -> int:
    """Count non-overlapping occurrences of ``needle`` in ``haystack``."""
    if not needle:
        return 0
    return haystack.count(needle)


def occurrence_in_string(haystack: str, index: int, needle: str) -> int:
    """
    Rank of the occurrence of ``needle`` that starts at ``index``.

    Args:
        haystack: Text to search
        index: Character offset where this occurrence starts
        needle: Substring being ranked

    Returns:
        1-based occurrence number
    """
    return occurrences_in_string(haystack[:index], needle) + 1


def occurrences_in_tokens(tokens: Sequence[Token], text: str) -> int:
    """Count tokens whose text equals ``text``."""
    return sum(1 for token in tokens if token.text == text)


def occurrence_in_tokens(tokens: Sequence[Token], index: int, text: str) -> int:
    """1-based rank of ``tokens[index]`` among tokens with the same text."""
    return occurrences_in_tokens(tokens[: index + 1], text)
