"""Directory scanning utilities."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from src.models.file_entry import DEFAULT_TIME_FORMAT, FileEntry

console = Console()


def get_current_path() -> Path:
    """Return the resolved path of the current working directory."""
    return Path(".").resolve()


def scan_directory(folder_path: Path, time_format: str = DEFAULT_TIME_FORMAT) -> list[FileEntry]:
    """
    List the files and directories directly inside a folder.

    Entries that cannot be read, such as dangling symlinks, are skipped
    with a warning.

    Args:
        folder_path: Path to the folder to scan
        time_format: strftime pattern for entry creation times

    Returns:
        list[FileEntry]: Entries sorted by name

    Raises:
        FileNotFoundError: If the folder does not exist
        NotADirectoryError: If the path is not a directory
    """
    if not folder_path.exists():
        raise FileNotFoundError(f"Folder does not exist: {folder_path}")
    if not folder_path.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {folder_path}")

    entries: list[FileEntry] = []
    for path in folder_path.iterdir():
        try:
            entries.append(FileEntry.from_path(path, time_format))
        except OSError as e:
            console.print(f"[yellow]Warning: Skipping unreadable entry {escape(path.name)}: {escape(str(e.strerror or e))}[/yellow]")

    entries.sort(key=lambda entry: entry.name)
    return entries
