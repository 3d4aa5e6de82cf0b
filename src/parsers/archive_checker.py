"""Archive file detection utilities."""

from __future__ import annotations

import zipfile

from src.models.file_entry import FileEntry


def is_archive(entry: FileEntry) -> bool:
    """
    Check whether an entry is a readable zip archive.

    Args:
        entry: Directory entry to check

    Returns:
        bool: True if the entry is a plain file with a valid zip structure
    """
    if not entry.is_file or entry.path is None:
        return False

    return zipfile.is_zipfile(entry.path)
