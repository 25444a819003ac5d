"""Exception types raised while scanning and rendering directory trees."""

from __future__ import annotations


class ScanError(Exception):
    """Base exception for treescan errors."""


class DirectoryUnreadable(ScanError):
    """A directory could not be listed."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"Cannot read directory: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class RootUnreadable(DirectoryUnreadable):
    """The scan root itself could not be listed."""


class EntryTypeUnknown(ScanError):
    """File type could not be determined for one directory entry."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f'Couldn\'t get file type for "{path}"')


class NameEncodingError(ScanError):
    """An entry name or path cannot be rendered as text."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Cannot display name as text: {value!r}")


__all__ = [
    "ScanError",
    "DirectoryUnreadable",
    "RootUnreadable",
    "EntryTypeUnknown",
    "NameEncodingError",
]
