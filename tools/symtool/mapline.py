"""
Heuristic symbol/address extraction from a single map file line.

Map files come in many layouts, so no columns are assumed. A line
matches when it contains an 8 hex digit address inside the accepted
address window and an identifier somewhere on the same line. Hex-looking
runs that start with a digit are skipped while looking for the
identifier, so the address itself is not taken as the symbol.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from . import config
from .cursor import Cursor, is_hex_digit, is_ident_char, is_ident_start


@dataclass(frozen=True)
class SymAddr:
    """An address and a symbol found on the same line."""
    address: int
    address_range: Tuple[int, int]  # [start, end) within the line
    symbol: str
    symbol_range: Tuple[int, int]

    def __str__(self) -> str:
        return f"{self.symbol} {self.address:08X}"


def find_address(line: str) -> Optional[Tuple[int, int]]:
    """
    Find the leftmost 8 hex digit run whose value is a map address.

    Windows overlap, so "F80010000" matches at offset 1. Returns
    (address, start offset) or None.
    """
    width = config.ADDRESS_DIGITS
    for i in range(len(line) - width + 1):
        window = line[i:i + width]
        if not all(is_hex_digit(c) for c in window):
            continue
        value = int(window, 16)
        if config.is_map_address(value):
            return value, i
    return None


def find_symbol(line: str) -> Optional[Tuple[int, int]]:
    """
    Find the first identifier on the line that is not part of a number.

    A numeric character starts a hex-looking run; the scan skips the
    hex digits after it and resumes at the first non-hex character.
    Returns the [start, end) range or None.
    """
    cursor = Cursor(line)
    while True:
        c = cursor.peek()
        if c is None:
            return None
        if is_ident_start(c):
            break
        cursor.advance()
        if c.isnumeric():
            # don't parse hex numbers as a symbol
            cursor.take_while(is_hex_digit)
            if cursor.at_end():
                return None

    start = cursor.offset
    cursor.take_while(is_ident_char)
    return start, cursor.offset


def parse_line(line: str) -> Optional[SymAddr]:
    """Parse a map file line into a SymAddr, or None if it has no match."""
    found = find_address(line)
    if found is None:
        return None
    address, address_start = found

    symbol_range = find_symbol(line)
    if symbol_range is None:
        return None

    start, end = symbol_range
    return SymAddr(
        address=address,
        address_range=(address_start, address_start + config.ADDRESS_DIGITS),
        symbol=line[start:end],
        symbol_range=symbol_range,
    )


def build_lookup(lines: Iterable[str]) -> Dict[str, int]:
    """Map symbol -> address. Later lines override earlier ones."""
    lookup = {}
    for line in lines:
        info = parse_line(line)
        if info is not None:
            lookup[info.symbol] = info.address
    return lookup


def build_renames(lines: Iterable[str]) -> Dict[int, str]:
    """Map address -> new symbol name. Later lines override earlier ones."""
    renames = {}
    for line in lines:
        info = parse_line(line)
        if info is not None:
            renames[info.address] = info.symbol
    return renames
