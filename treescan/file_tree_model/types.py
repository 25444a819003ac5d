"""Domain datatypes for scanned file/directory trees."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    """Closed File/Directory classification of one scanned entry."""

    FILE = "File"
    DIRECTORY = "Directory"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Entry:
    """Domain entry with recursively nested children.

    ``path`` is the scan root joined with each segment exactly as given, so
    it stays relative (``./`` prefix included) when the root was relative.
    ``children`` is only ever non-empty for directories.
    """

    path: str
    name: str
    kind: EntryKind
    children: tuple["Entry", ...] = ()

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class EntryCounts:
    files: int
    directories: int


__all__ = [
    "EntryKind",
    "Entry",
    "EntryCounts",
]
