"""
Function symbol extraction from C-like source text.

Reports every identifier that is directly followed by '(' unless it is a
control-flow keyword or the parenthesis opens a function pointer
declarator. This is a heuristic, not a parser: calls and macro
invocations are reported along with definitions, and comments or
strings are scanned like code.
"""

from typing import Iterator, List

from . import config
from .cursor import Cursor, is_ident_start


def _match_function_site(cursor: Cursor) -> str:
    """
    Try to read `name (` at the cursor.

    Returns the symbol name, or "" if this position is not a function
    site. The cursor is left wherever matching stopped.
    """
    cursor.take_whitespace()
    name = cursor.take_identifier()
    if not name:
        return ""

    # ensure function call
    cursor.take_whitespace()
    if not cursor.take_while(lambda c: c == "("):
        return ""

    # filter function pointers/typedefs: `void (*callback)(int)`
    cursor.take_whitespace()
    if cursor.take_while(lambda c: c == "*"):
        return ""

    if name in config.BUILTIN_KEYWORDS:
        return ""

    return name


def extract_symbols(text: str) -> Iterator[str]:
    """Yield candidate function symbols in order of occurrence."""
    cursor = Cursor(text)
    while not cursor.at_end():
        name = _match_function_site(cursor)
        if name:
            yield name

        # skip until next symbol, then try again
        cursor.take_while(lambda c: not is_ident_start(c))


def extract_file(path) -> List[str]:
    """Read one source file and return its candidate symbols."""
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return list(extract_symbols(text))
