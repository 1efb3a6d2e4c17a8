"""
Selection helpers.

A selection names a substring by its text and occurrence number, e.g.
``{"text": "cat", "occurrence": 2}`` for the second "cat". Selections are
resolved to character ranges, and ranges splice a string into selected and
unselected segments.
"""

import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..types import Segment

logger = logging.getLogger(__name__)

Range = Tuple[int, int]


def _selection_fields(selection: Any) -> Tuple[str, int]:
    if isinstance(selection, dict):
        return selection["text"], selection.get("occurrence") or 1
    return selection.text, getattr(selection, "occurrence", None) or 1


def _find_occurrence(text: str, needle: str, occurrence: int) -> Optional[int]:
    """Start offset of the nth non-overlapping occurrence, or None."""
    if not needle or occurrence < 1:
        return None
    start = -len(needle)
    for _ in range(occurrence):
        start = text.find(needle, start + len(needle))
        if start == -1:
            return None
    return start


def merge_ranges(ranges: Iterable[Range]) -> List[Range]:
    """Sort ranges and merge any that overlap or touch."""
    merged: List[Range] = []
    for start, end in sorted(ranges):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def selections_to_ranges(text: str, selections: Iterable[Any]) -> List[Range]:
    """
    Resolve selections to merged ``(start, end)`` ranges.

    Args:
        text: String the selections refer to
        selections: Dicts with ``text``/``occurrence`` keys, or Token-like
            objects; a missing occurrence means the first

    Returns:
        Sorted, non-overlapping ranges. Selections not found are skipped.
    """
    ranges = []
    for selection in selections:
        needle, occurrence = _selection_fields(selection)
        start = _find_occurrence(text, needle, occurrence)
        if start is None:
            logger.debug(f"Selection {needle!r} occurrence {occurrence} not found, skipping")
            continue
        ranges.append((start, start + len(needle)))
    return merge_ranges(ranges)


def splice_string_on_ranges(text: str, ranges: Sequence[Range]) -> List[Segment]:
    """
    Split ``text`` into segments marking which parts fall inside ``ranges``.

    Concatenating the segment texts gives back ``text``. Empty segments are
    not emitted.
    """
    segments = []
    cursor = 0
    for start, end in merge_ranges(ranges):
        start = max(start, cursor)
        end = min(end, len(text))
        if start >= end:
            continue
        if start > cursor:
            segments.append(Segment(text[cursor:start], selected=False))
        segments.append(Segment(text[start:end], selected=True))
        cursor = end
    if cursor < len(text):
        segments.append(Segment(text[cursor:], selected=False))
    return segments


def selection_array(text: str, selections: Iterable[Any]) -> List[Segment]:
    """Splice ``text`` on the ranges of ``selections``."""
    return splice_string_on_ranges(text, selections_to_ranges(text, selections))
