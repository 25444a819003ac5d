"""Domain model for scanned file/directory trees.

This package contains the non-rendering tree primitives:
- file/directory entry datatypes with nested children
- filesystem listing and recursive scan helpers
- top-level file/directory counting
"""

from __future__ import annotations

from .types import Entry, EntryCounts, EntryKind
from .fs import (
    DirectoryChild,
    SkipHandler,
    count_entries,
    list_directory_children,
    report_skipped_entry,
    scan,
)

__all__ = [
    "Entry",
    "EntryCounts",
    "EntryKind",
    "DirectoryChild",
    "SkipHandler",
    "report_skipped_entry",
    "list_directory_children",
    "scan",
    "count_entries",
]
