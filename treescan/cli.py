"""Command-line front door for treescan.

Parses CLI options, scans the requested root, prints top-level counts, and
optionally prints the rendered tree.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import __version__, config
from .errors import DirectoryUnreadable, NameEncodingError
from .file_tree_model import count_entries, scan
from .render import render_tree

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treescan",
        description="Count files and folders under a directory and optionally print its tree.",
    )
    parser.add_argument("-p", "--path", required=True, metavar="PATH", help="Root directory to scan.")
    parser.add_argument("-s", dest="show_output", action="store_true", help="Print the directory tree after the counts.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show each entry's full path in the tree.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main() -> None:
    """Parse CLI arguments, scan ``--path``, and print counts and tree.

    Flags from the config file act as defaults; command-line flags can only
    switch them on. Unreadable directories and undisplayable names end the
    process through ``SystemExit`` with a non-zero status.
    """
    args = _build_parser().parse_args()
    logging.basicConfig(level=config.load_log_level(), format=LOG_FORMAT, stream=sys.stderr)

    show_output = args.show_output or config.load_show_output()
    verbose = args.verbose or config.load_verbose()
    placeholder = config.load_name_placeholder()

    # Keep the root as given so entry paths stay relative when it is relative.
    root = args.path
    try:
        entries = scan(root)
    except DirectoryUnreadable as exc:
        raise SystemExit(str(exc)) from exc

    counts = count_entries(entries)
    print(f"File Count: {counts.files}")
    print(f"Folder Count: {counts.directories}")

    if not show_output:
        return
    try:
        lines = render_tree(root, entries, verbose=verbose, placeholder=placeholder)
    except NameEncodingError as exc:
        raise SystemExit(str(exc)) from exc
    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
