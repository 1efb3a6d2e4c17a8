"""Core data types for stringtok."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class TokenType(str, Enum):
    """Token types produced by the built-in matchers."""
    WORD = "word"
    NUMBER = "number"
    PUNCTUATION = "punctuation"
    WHITESPACE = "whitespace"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class MatchResult:
    """A single matcher hit inside the scanned string."""
    start: int
    text: str
    groups: Tuple[Optional[str], ...] = ()

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass(frozen=True)
class Token:
    """
    A classified, contiguous piece of the input.

    ``type`` is a plain string so custom matcher names work as types.
    ``occurrence``/``occurrences`` stay None until the tokenizer annotates
    the filtered stream.
    """
    text: str
    type: str
    sub_matches: Tuple[Optional[str], ...] = field(default_factory=tuple)
    occurrence: Optional[int] = None
    occurrences: Optional[int] = None

    @property
    def is_annotated(self) -> bool:
        return self.occurrence is not None

    def with_occurrence(self, occurrence: int, occurrences: int) -> "Token":
        """Return a copy carrying an occurrence annotation."""
        return replace(self, occurrence=occurrence, occurrences=occurrences)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: Dict[str, Any] = {"text": self.text, "type": self.type}
        if self.sub_matches:
            data["sub_matches"] = list(self.sub_matches)
        if self.is_annotated:
            data["occurrence"] = self.occurrence
            data["occurrences"] = self.occurrences
        return data


@dataclass(frozen=True)
class Segment:
    """A piece of a string produced by range splicing."""
    text: str
    selected: bool = False
