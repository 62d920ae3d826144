from __future__ import annotations

import argparse
import os
import sys
from typing import List, TextIO

from tqdm import tqdm

from .config import config_from_env, load_env_file
from .scanner import DuplicateScanner, ScanOptions
from .table import ChainedTable


DEFAULT_PROG = "find-duplicates"
FLAG_LETTERS = "cqph"


def usage(prog: str, stream: TextIO) -> None:
    stream.write(f"Usage: {prog} paths...\n")
    stream.write("    -c     Only display total number of duplicates\n")
    stream.write("    -q     Do not write anything (exit with 0 if duplicate found)\n")
    stream.write("    -p     Show a progress counter on stderr\n")


def build_arg_parser(prog: str = DEFAULT_PROG) -> argparse.ArgumentParser:
    # Usage text comes from usage(); expects argv already passed through normalize_flags
    p = argparse.ArgumentParser(prog=prog, description="Find duplicate files by content hash", add_help=False)
    p.add_argument("paths", nargs="*", help="Files or directories to scan")
    p.add_argument("-c", dest="count", action="store_true", help="Only display total number of duplicates")
    p.add_argument("-q", dest="quiet", action="store_true", help="Do not write anything")
    p.add_argument("-p", dest="progress", action="store_true", help="Show a progress counter on stderr")
    p.add_argument("-h", dest="help", action="store_true", help="Show usage and exit")
    return p


def normalize_flags(argv: List[str]) -> List[str]:
    """
    Reduce every flag token to the letter that follows its dash.

    Only the first letter counts, so `-cz` is `-c` and `-hx` is `-h`. Tokens
    whose letter is not a known flag (including `--long` options) are dropped.
    """
    out: List[str] = []
    for arg in argv:
        if len(arg) > 1 and arg.startswith("-"):
            if arg[1] in FLAG_LETTERS:
                out.append("-" + arg[1])
            continue
        out.append(arg)
    return out


def exit_status(count: int, quiet: bool) -> int:
    # Quiet mode reports through the exit status: 1 means nothing was found
    return 1 if quiet and count == 0 else 0


def main(argv: List[str] | None = None, prog: str | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    prog = prog or os.path.basename(sys.argv[0]) or DEFAULT_PROG
    if not argv:
        return 0

    args = build_arg_parser(prog).parse_intermixed_args(normalize_flags(argv))
    if args.help:
        usage(prog, sys.stderr)
        return 0

    load_env_file()
    try:
        config = config_from_env()
    except ValueError as e:
        print(f"{prog}: {e}", file=sys.stderr)
        return 2

    options = ScanOptions(count=args.count, quiet=args.quiet, chunk_size=config.chunk_size)
    table = ChainedTable(config.capacity or len(args.paths))
    try:
        with tqdm(desc="Scanning", unit="file", file=sys.stderr,
                  disable=args.quiet or not args.progress) as bar:
            scanner = DuplicateScanner(table, options, on_file=lambda _path: bar.update(1))
            count = scanner.scan_all(args.paths)
    finally:
        table.clear()

    if args.count and not args.quiet:
        print(count)
    return exit_status(count, args.quiet)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
