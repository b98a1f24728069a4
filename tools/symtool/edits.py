"""
Range-based text edits applied onto an immutable source string.

Edits can be collected in any order. apply_edits() sorts them by
descending start so each splice leaves the offsets of the remaining
edits valid, and builds the output from slices of the original text.
"""

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class TextEdit:
    """Replace text[start:end] with replacement."""
    start: int
    end: int
    replacement: str


def apply_edits(text: str, edits: Iterable[TextEdit]) -> str:
    """
    Apply non-overlapping edits to text and return the new string.

    Raises ValueError if an edit lies outside the text or two edits
    overlap.
    """
    ordered: List[TextEdit] = sorted(edits, key=lambda e: (e.start, e.end),
                                     reverse=True)

    pieces = []
    tail = len(text)
    for edit in ordered:
        if not 0 <= edit.start <= edit.end <= len(text):
            raise ValueError(
                f"Edit range [{edit.start}, {edit.end}) outside text of "
                f"length {len(text)}"
            )
        if edit.end > tail:
            raise ValueError(
                f"Edit range [{edit.start}, {edit.end}) overlaps a later edit"
            )
        pieces.append(text[edit.end:tail])
        pieces.append(edit.replacement)
        tail = edit.start
    pieces.append(text[:tail])

    return "".join(reversed(pieces))
