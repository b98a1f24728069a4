"""
CLI entry point for the symbol tool.

Usage:
    py -3 -m tools.symtool extract [-h] <path>
    py -3 -m tools.symtool addr <mapfile>
    py -3 -m tools.symtool update <mapfile>

Examples:
    py -3 -m tools.symtool extract -h include/ | py -3 -m tools.symtool addr build/game.map
    py -3 -m tools.symtool addr old.map < names.txt | py -3 -m tools.symtool update new.map
"""

import argparse
import os
import sys

from . import config
from . import commands
from .report import log_err

COMMANDS = ("extract", "addr", "update")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="symtool",
        description="Extract function symbols from C sources and look up "
                    "or rename them in map files",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress information to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    for name in ("addr", "update"):
        sub = subparsers.add_parser(name)
        sub.add_argument("mapfile", nargs="?", help="Map file")

    return parser


def _find_command(argv):
    for arg in argv:
        if not arg.startswith("-"):
            return arg
    return None


def _extract(argv):
    """
    Run `extract`. Arguments are split by hand because -h means "headers
    only" here: the last argument is the search path and every other
    argument after the command is a flag.
    """
    index = argv.index("extract")
    verbose = "-v" in argv[:index] or "--verbose" in argv[:index]
    rest = argv[index + 1:]
    if not rest:
        print(config.USAGE, end="")
        return config.EXIT_FAILURE

    *flags, search_path = rest
    header_only = False
    unknown = []
    for arg in flags:
        if arg == "-h":
            header_only = True
        else:
            unknown.append(arg)

    return commands.extract(
        search_path,
        header_only=header_only,
        unknown_args=unknown,
        verbose=verbose,
    )


def main(argv=None):
    """Run symtool and return the exit code."""
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print(config.USAGE, end="")
        return config.EXIT_SUCCESS

    command = _find_command(argv)
    if command not in COMMANDS:
        print(config.USAGE, end="")
        return config.EXIT_FAILURE

    if command == "extract":
        return _extract(argv)

    args, unknown = build_parser().parse_known_args(argv)

    for arg in unknown:
        log_err(f"Unknown argument '{arg}'")

    if args.mapfile is None:
        print(config.USAGE, end="")
        return config.EXIT_FAILURE

    if args.command == "addr":
        return commands.addr(args.mapfile, verbose=args.verbose)
    return commands.update(args.mapfile, verbose=args.verbose)


def run():
    try:
        code = main()
        sys.stdout.flush()
    except BrokenPipeError:
        # Python flushes stdout again at exit; point it at devnull so the
        # closed pipe isn't reported a second time.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        code = config.EXIT_SUCCESS
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        code = config.EXIT_INTERRUPTED
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        raise
    sys.exit(code)


if __name__ == "__main__":
    run()
