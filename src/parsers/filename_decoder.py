"""Webtoon file name decoding.

Archive names follow the layout::

    <PLATFORM>_<title> - <authors>[ [完]]

for example ``NAVER_Tower of God - SIU [完]``.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.models.platform import Platform

PLATFORM_DELIMITER = "_"
TITLE_DELIMITER = " - "
COMPLETED_MARKER = " [完]"


class InvalidFilenameError(ValueError):
    """Raised when a file name does not follow the webtoon naming layout."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Invalid webtoon file name '{filename}': {reason}")
        self.filename = filename
        self.reason = reason


@dataclass(frozen=True)
class DecodedFilename:
    """Metadata recovered from a file name."""

    platform: str
    title: str
    authors: str
    completed: bool


def decode_filename(filename: str) -> DecodedFilename:
    """
    Decode platform, title, authors and completion from a file name.

    Args:
        filename: File name without its extension

    Returns:
        DecodedFilename: The decoded fields

    Raises:
        InvalidFilenameError: If the platform or title delimiter is missing,
            or the title is empty
    """
    acronym, found, remainder = filename.partition(PLATFORM_DELIMITER)
    if not found:
        raise InvalidFilenameError(filename, f"missing platform delimiter '{PLATFORM_DELIMITER}'")
    platform = Platform.display_name_for(acronym)

    # Titles may contain the delimiter, authors may not
    title, found, author_part = remainder.rpartition(TITLE_DELIMITER)
    if not found:
        raise InvalidFilenameError(filename, f"missing title delimiter '{TITLE_DELIMITER}'")
    if not title:
        raise InvalidFilenameError(filename, "empty title")

    completed = filename.endswith(COMPLETED_MARKER)
    if completed:
        marker_index = author_part.find(COMPLETED_MARKER)
        authors = author_part[:marker_index] if marker_index >= 0 else ""
    else:
        authors = author_part

    return DecodedFilename(
        platform=platform,
        title=title,
        authors=authors,
        completed=completed,
    )
