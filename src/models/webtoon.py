"""Webtoon record data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Webtoon:
    """One catalogued webtoon archive."""

    title: str
    authors: str
    platform: str
    completed: bool
    creation_time: str
    file_extension: str
    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"size must be >= 0, got {self.size}")

    @property
    def identity(self) -> tuple[str, str, str, bool]:
        """Fields describing the series itself, ignoring the physical file."""
        return (self.platform, self.title, self.authors, self.completed)
