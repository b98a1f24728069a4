"""
The symtool subcommands: extract, addr and update.

Each command returns a process exit code. Failing to read or write the
map file is fatal; a bad source file, directory or input line is
reported and skipped.
"""

import sys
from typing import Iterator, Sequence

from . import config
from .extractor import extract_file
from .files import files_in_path, has_extension, read_text, write_text
from .mapline import build_lookup, build_renames
from .report import log_err, progress
from .updater import update_map_text


def read_input_lines(stream=None) -> Iterator[str]:
    """
    Yield piped input lines without their line endings.

    Lines that are not valid UTF-8 are reported and skipped.
    """
    if stream is None:
        stream = sys.stdin.buffer

    for lineno, raw in enumerate(stream, 1):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            log_err(f"Failed to decode input line {lineno}: {e}")
            continue

        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield line


def _read_map(mapfile_path):
    """Read the map file, or report the failure and return None."""
    try:
        return read_text(mapfile_path)
    except (OSError, UnicodeDecodeError) as e:
        log_err(f"Failed to read map file {mapfile_path}: {e}")
        return None


def extract(search_path: str, header_only: bool = False,
            unknown_args: Sequence[str] = (), verbose: bool = False) -> int:
    """Print every function symbol found in the source files under a path."""
    for arg in unknown_args:
        log_err(f"Unknown argument '{arg}'")

    extensions = config.HEADER_EXTENSIONS if header_only else config.SOURCE_EXTENSIONS
    paths = files_in_path(search_path)
    progress(verbose, f"Found {len(paths):,} files under {search_path}")

    scanned = 0
    found = 0
    for path in paths:
        if not has_extension(path, extensions):
            continue

        try:
            names = extract_file(path)
        except (OSError, UnicodeDecodeError) as e:
            log_err(f"Failed to read file {path}: {e}")
            continue

        scanned += 1
        try:
            for name in names:
                sys.stdout.write(f"{name}\n")
                found += 1
        except BrokenPipeError:
            # reader stopped early (e.g. `| head`)
            return config.EXIT_SUCCESS

    progress(verbose, f"Scanned {scanned:,} files, {found:,} symbols")
    return config.EXIT_SUCCESS


def addr(mapfile_path: str, verbose: bool = False, stream=None) -> int:
    """Print `<symbol> <ADDRESS>` for each piped symbol found in the map."""
    mapfile = _read_map(mapfile_path)
    if mapfile is None:
        return config.EXIT_FAILURE

    lookup = build_lookup(mapfile.split("\n"))
    progress(verbose, f"Map symbols: {len(lookup):,}")

    for line in read_input_lines(stream):
        sym = line.strip()
        address = lookup.get(sym)
        if address is not None:
            print(f"{sym} {address:08X}")

    return config.EXIT_SUCCESS


def update(mapfile_path: str, verbose: bool = False, stream=None) -> int:
    """Rename map file symbols using piped address/symbol lines."""
    mapfile = _read_map(mapfile_path)
    if mapfile is None:
        return config.EXIT_FAILURE

    renames = build_renames(read_input_lines(stream))
    progress(verbose, f"Rename entries: {len(renames):,}")
    if not renames:
        return config.EXIT_SUCCESS

    new_mapfile, replaced = update_map_text(mapfile, renames)
    for old_name, new_name in replaced:
        print(f"{old_name} -> {new_name}")
    progress(verbose, f"Replaced {len(replaced):,} symbols")

    try:
        write_text(mapfile_path, new_mapfile)
    except OSError as e:
        log_err(f"Failed to write map file {mapfile_path}: {e}")
        return config.EXIT_FAILURE

    return config.EXIT_SUCCESS
