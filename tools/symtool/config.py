"""
Configuration constants for the symbol tool.

Defines the accepted address window, the keyword filter used by the
function extractor, source file extensions, and the usage text.
"""

# ============================================================
# Map File Addresses
# ============================================================

# Addresses outside this window are never treated as symbol addresses,
# even when they are 8 hex digits.
ADDRESS_MIN = 0x80000000
ADDRESS_MAX = 0x81800000  # exclusive

# Width of an address in hex digits
ADDRESS_DIGITS = 8


def is_map_address(value):
    """Check whether a value falls inside the accepted address window."""
    return ADDRESS_MIN <= value < ADDRESS_MAX


# ============================================================
# Function Extraction
# ============================================================

# Identifiers followed by '(' that are never function symbols
BUILTIN_KEYWORDS = frozenset({
    "if", "for", "while", "return", "switch", "case",
    "sizeof", "alignof", "__attribute__",
})

# File extensions scanned by `extract` (without the dot)
SOURCE_EXTENSIONS = ("c", "h", "cc")
HEADER_EXTENSIONS = ("h",)

# ============================================================
# Command Line
# ============================================================

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

USAGE = """USAGE:
    symtool extract [args] <path>
        Finds and prints all function symbols in passed directory or file.

        -h      Only use header files

    symtool addr <mapfile>
        For each piped line, find the address of that symbol given in the passed mapfile, then print the symbol and the address.

        The mapfile format is flexible. The only requirement is that the symbol and the address are on the same line.

    symtool update <mapfile>
        For each piped line, find the symbol and address on that line update the passed mapfile with the symbol.

        The input and output map files formats are flexible.
        The only requirement is that the symbol and the address are on the same line.

    Pass -v before the command to print progress to stderr.
"""
