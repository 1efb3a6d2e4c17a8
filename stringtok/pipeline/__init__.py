"""
stringtok pipeline modules.

Text-level helpers around the scanner: normalization, occurrence counting,
selection splicing.
"""

from .normalizer import (
    normalizer,
    normalizer_destructive,
    NORMALIZATIONS,
    DESTRUCTIVE_NORMALIZATIONS,
)
from .occurrences import (
    occurrence_in_string,
    occurrences_in_string,
    occurrence_in_tokens,
    occurrences_in_tokens,
)
from .selections import (
    merge_ranges,
    selection_array,
    selections_to_ranges,
    splice_string_on_ranges,
)

__all__ = [
    "normalizer",
    "normalizer_destructive",
    "NORMALIZATIONS",
    "DESTRUCTIVE_NORMALIZATIONS",
    "occurrence_in_string",
    "occurrences_in_string",
    "occurrence_in_tokens",
    "occurrences_in_tokens",
    "merge_ranges",
    "selection_array",
    "selections_to_ranges",
    "splice_string_on_ranges",
]
