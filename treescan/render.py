"""Plain-text rendering of scanned entry forests.

Each row is an indentation prefix (one space per depth level), the ``↳``
marker, and ``<Kind> : <name> : <path>`` where the path column is only filled
in verbose mode. Siblings are emitted in reverse scan order.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from pathlib import Path

from .errors import NameEncodingError
from .file_tree_model import Entry

MARKER = "↳ "


def entry_prefix(level: int) -> str:
    """Return the indentation-plus-marker prefix for ``level``."""
    return " " * max(0, level) + MARKER


def display_text(value: str, placeholder: str | None = None) -> str:
    """Return ``value`` if it is representable as UTF-8 text.

    Names decoded with surrogate escapes are not. Those raise
    ``NameEncodingError`` unless ``placeholder`` is given, in which case the
    placeholder is returned instead.
    """
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        if placeholder is None:
            raise NameEncodingError(value) from exc
        return placeholder
    return value


def format_entry_line(entry: Entry, level: int, verbose: bool, placeholder: str | None = None) -> str:
    path_text = display_text(entry.path, placeholder) if verbose else ""
    return f"{entry_prefix(level)}{entry.kind} : {display_text(entry.name, placeholder)} : {path_text}"


def iter_tree_lines(
    entries: Sequence[Entry],
    level: int = 1,
    verbose: bool = False,
    placeholder: str | None = None,
) -> Iterator[str]:
    """Yield tree rows pre-order, visiting each level's siblings in reverse."""
    for entry in reversed(entries):
        yield format_entry_line(entry, level, verbose, placeholder)
        if entry.children:
            yield from iter_tree_lines(entry.children, level + 1, verbose, placeholder)


def render_tree(
    root: Path | str,
    entries: Sequence[Entry],
    verbose: bool = False,
    placeholder: str | None = None,
) -> list[str]:
    """Return the ``Root:`` header row followed by all entry rows.

    The root path is shown lossily (undecodable bytes become U+FFFD) and never
    fails; entry rows go through ``display_text``.
    """
    root_text = os.fsencode(root).decode("utf-8", errors="replace")
    lines = [f"Root: {root_text}"]
    lines.extend(iter_tree_lines(entries, 1, verbose, placeholder))
    return lines


__all__ = [
    "MARKER",
    "entry_prefix",
    "display_text",
    "format_entry_line",
    "iter_tree_lines",
    "render_tree",
]
