"""Directory entry data model."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class FileEntry:
    """Snapshot of a single file or directory inside a scanned folder."""

    name: str
    base_name: str
    extension: str
    size: int
    is_file: bool
    creation_time: str
    path: Path | None = None

    @classmethod
    def from_path(cls, path: Path, time_format: str = DEFAULT_TIME_FORMAT) -> FileEntry:
        """Create an entry from a filesystem path.

        Args:
            path: Path to the file or directory
            time_format: strftime pattern for the creation time

        Returns:
            FileEntry describing the path
        """
        stat = path.stat()
        is_file = path.is_file()

        # st_birthtime is only available on some platforms
        created = getattr(stat, "st_birthtime", stat.st_ctime)
        creation_time = datetime.fromtimestamp(created).strftime(time_format)

        base_name, extension = split_extension(path.name) if is_file else (path.name, "")

        return cls(
            name=path.name,
            base_name=base_name,
            extension=extension,
            size=stat.st_size if is_file else 0,
            is_file=is_file,
            creation_time=creation_time,
            path=path,
        )


def split_extension(filename: str) -> tuple[str, str]:
    """Split a file name into base name and extension without the dot.

    Args:
        filename: File name, e.g. "NAVER_Title - Author.zip"

    Returns:
        tuple: (base_name, extension), extension is "" when there is none
    """
    base_name, extension = os.path.splitext(filename)
    return base_name, extension[1:]
