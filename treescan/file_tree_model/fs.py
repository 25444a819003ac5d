"""Filesystem scanning and domain-tree construction for file/directory models."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..errors import DirectoryUnreadable, EntryTypeUnknown, RootUnreadable
from .types import Entry, EntryCounts, EntryKind

logger = logging.getLogger(__name__)

SkipHandler = Callable[[EntryTypeUnknown], None]


@dataclass(frozen=True)
class DirectoryChild:
    """One classified directory child row."""

    name: str
    path: str
    is_dir: bool


def report_skipped_entry(error: EntryTypeUnknown) -> None:
    """Default skip handler: print a diagnostic line naming the skipped path."""
    logger.debug("skipping entry with unknown type: %s", error.path)
    print(error)


def list_directory_children(directory: str | os.PathLike[str]) -> list[DirectoryChild | EntryTypeUnknown]:
    """List and classify children of ``directory`` in listing order.

    Each child's type comes from an ``lstat`` of the entry, so symlinks are
    classified as files. A child whose ``lstat`` fails (for example because
    it vanished mid-scan) is returned as an ``EntryTypeUnknown`` in its
    listing position. Child paths are ``directory`` joined with the child
    name exactly as given, without normalisation. Raises
    ``DirectoryUnreadable`` when the directory itself cannot be listed.
    """
    directory = os.fspath(directory)
    children: list[DirectoryChild | EntryTypeUnknown] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    mode = child.stat(follow_symlinks=False).st_mode
                except OSError as exc:
                    logger.debug("file type query failed for %s: %s", child.path, exc)
                    children.append(EntryTypeUnknown(child.path))
                    continue
                children.append(DirectoryChild(name=child.name, path=child.path, is_dir=stat.S_ISDIR(mode)))
    except OSError as exc:
        logger.debug("cannot list %s: %s", directory, exc)
        raise DirectoryUnreadable(directory, exc.strerror or str(exc)) from exc
    return children


def scan(root: str | os.PathLike[str], on_skip: SkipHandler | None = report_skipped_entry) -> tuple[Entry, ...]:
    """Build the entry forest below ``root``, depth-first and unsorted.

    The root itself is not part of the result. A root that cannot be listed
    raises ``RootUnreadable``; a nested directory that cannot be listed raises
    ``DirectoryUnreadable``. Entries with an undeterminable type are passed to
    ``on_skip`` in pre-order and left out.
    """
    root = os.fspath(root)

    def build_children(listing: list[DirectoryChild | EntryTypeUnknown]) -> tuple[Entry, ...]:
        nodes: list[Entry] = []
        for child in listing:
            if isinstance(child, EntryTypeUnknown):
                if on_skip is not None:
                    on_skip(child)
                continue

            if child.is_dir:
                nodes.append(
                    Entry(
                        path=child.path,
                        name=child.name,
                        kind=EntryKind.DIRECTORY,
                        children=build_children(list_directory_children(child.path)),
                    )
                )
                continue

            nodes.append(Entry(path=child.path, name=child.name, kind=EntryKind.FILE))
        return tuple(nodes)

    try:
        root_listing = list_directory_children(root)
    except DirectoryUnreadable as exc:
        raise RootUnreadable(root, exc.reason) from exc.__cause__
    return build_children(root_listing)


def count_entries(entries: Iterable[Entry]) -> EntryCounts:
    """Count files and directories in ``entries`` without descending."""
    files = 0
    directories = 0
    for entry in entries:
        if entry.is_dir:
            directories += 1
        else:
            files += 1
    return EntryCounts(files=files, directories=directories)


__all__ = [
    "DirectoryChild",
    "SkipHandler",
    "report_skipped_entry",
    "list_directory_children",
    "scan",
    "count_entries",
]
