"""Latest webtoon list export lookup."""

from __future__ import annotations

from collections.abc import Iterable

from src.models.file_entry import FileEntry

DEFAULT_EXPORT_PREFIX = "webtoon_list_"
DEFAULT_EXPORT_EXTENSION = "xlsx"


def find_latest_export(
    entries: Iterable[FileEntry] | None,
    prefix: str = DEFAULT_EXPORT_PREFIX,
    extension: str = DEFAULT_EXPORT_EXTENSION,
) -> str | None:
    """Find the most recent spreadsheet export among directory entries.

    Export names carry a sortable timestamp after the prefix
    (e.g. ``webtoon_list_20231231235959.xlsx``), so the greatest name is the
    latest one.

    Args:
        entries: Directory entries, None is treated as empty
        prefix: Required base name prefix
        extension: Required extension, compared exactly and without the dot

    Returns:
        Full name of the latest export, or None if there is none
    """
    if entries is None:
        return None

    names = [
        entry.name
        for entry in entries
        if entry.is_file
        and entry.base_name.startswith(prefix)
        and entry.extension == extension
    ]
    return max(names, default=None)
