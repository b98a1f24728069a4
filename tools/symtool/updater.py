"""
Map file renaming.

Walks the map text from its last line to its first, and for every line
whose address is in the rename table replaces just the symbol's
characters with the new name. Everything else in the file is kept
as-is.
"""

from typing import Dict, Iterator, List, Tuple

from .edits import TextEdit, apply_edits
from .mapline import parse_line


def lines_from_end(text: str) -> Iterator[Tuple[int, str]]:
    """
    Yield (line start offset, line) from the last line to the first.

    Lines are split on '\\n' only; a trailing '\\r' stays on the line.
    Text after the final newline (possibly empty) is the last line.
    """
    end = len(text)
    while True:
        newline = text.rfind("\n", 0, end)
        start = newline + 1
        yield start, text[start:end]
        if newline < 0:
            break
        end = newline


def plan_renames(text: str, renames: Dict[int, str]
                 ) -> Tuple[List[TextEdit], List[Tuple[str, str]]]:
    """
    Collect symbol edits for every line whose address is being renamed.

    Returns the edits and the (old name, new name) pairs, both in
    end-to-start order.
    """
    edits = []
    replaced = []
    for line_start, line in lines_from_end(text):
        info = parse_line(line)
        if info is None:
            continue
        new_symbol = renames.get(info.address)
        if new_symbol is None:
            continue

        sym_start, sym_end = info.symbol_range
        edits.append(TextEdit(line_start + sym_start, line_start + sym_end,
                              new_symbol))
        replaced.append((info.symbol, new_symbol))

    return edits, replaced


def update_map_text(text: str, renames: Dict[int, str]
                    ) -> Tuple[str, List[Tuple[str, str]]]:
    """
    Apply a rename table to map file text.

    Returns the new text and the (old name, new name) pairs in the order
    they were found, last line first.
    """
    if not renames:
        return text, []

    edits, replaced = plan_renames(text, renames)
    return apply_edits(text, edits), replaced
