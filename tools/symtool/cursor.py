"""
Forward-only text cursor and character-class token scanning.

A Cursor tracks an offset into an immutable string. Every scanner is
built on peek()/advance(): a token is the longest run of characters
accepted by a predicate, and an empty token means no match (the cursor
does not move).
"""

from dataclasses import dataclass
from typing import Callable, Optional

_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")
_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_ascii_whitespace(c: str) -> bool:
    return c in _ASCII_WHITESPACE


def is_ident_start(c: str) -> bool:
    """First character of a C identifier: ASCII letter or underscore."""
    return c in _ASCII_LETTERS or c == "_"


def is_ident_char(c: str) -> bool:
    """Any later character of a C identifier."""
    return c in _ASCII_LETTERS or c in _ASCII_DIGITS or c == "_"


def is_hex_digit(c: str) -> bool:
    return c in _HEX_DIGITS


@dataclass
class Cursor:
    """Position within a string. Only ever moves forward."""
    text: str
    offset: int = 0

    @property
    def rest(self) -> str:
        """Remaining text from the current offset."""
        return self.text[self.offset:]

    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def peek(self) -> Optional[str]:
        """Next character, or None at end of input."""
        if self.offset < len(self.text):
            return self.text[self.offset]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return the next character, or None at end of input."""
        c = self.peek()
        if c is not None:
            self.offset += 1
        return c

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume the longest run of characters accepted by predicate."""
        start = self.offset
        while True:
            c = self.peek()
            if c is None or not predicate(c):
                break
            self.advance()
        return self.text[start:self.offset]

    def take_whitespace(self) -> str:
        return self.take_while(is_ascii_whitespace)

    def take_identifier(self) -> str:
        """
        Consume a C identifier.

        Returns "" without advancing when the next character cannot start
        an identifier (digits included).
        """
        c = self.peek()
        if c is None or not is_ident_start(c):
            return ""
        start = self.offset
        self.advance()
        self.take_while(is_ident_char)
        return self.text[start:self.offset]
