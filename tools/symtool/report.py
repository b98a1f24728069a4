"""
Diagnostic and progress output.

Diagnostics go to stdout, prefixed with the command line that produced
them, so they stay next to the output they concern when several runs
are piped together. Progress is only printed in verbose mode and goes
to stderr to keep stdout usable as data.
"""

import sys


def command_line() -> str:
    """The invoking command line, each argument followed by a space."""
    return "".join(f"{arg} " for arg in sys.argv)


def log_err(message: str) -> None:
    """Print a diagnostic line: `<command line> | <message>`."""
    sys.stdout.write(f"{command_line()}| {message}\n")
    sys.stdout.flush()


def progress(verbose: bool, message: str) -> None:
    if verbose:
        print(message, file=sys.stderr)
