"""Shared builders for catalog tests."""

from __future__ import annotations

import zipfile
from pathlib import Path

from src.models.file_entry import FileEntry, split_extension


def make_entry(
    name: str,
    size: int = 100,
    is_file: bool = True,
    creation_time: str = "2023-01-01 00:00:00",
) -> FileEntry:
    base_name, extension = split_extension(name) if is_file else (name, "")
    return FileEntry(
        name=name,
        base_name=base_name,
        extension=extension,
        size=size,
        is_file=is_file,
        creation_time=creation_time,
    )


def write_zip(path: Path) -> Path:
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("001.jpg", b"image")
    return path
