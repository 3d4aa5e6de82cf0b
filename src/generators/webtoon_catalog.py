"""
Webtoon catalog builder for archive directories.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape

from src.models.file_entry import FileEntry
from src.models.webtoon import Webtoon
from src.parsers.archive_checker import is_archive
from src.parsers.filename_decoder import InvalidFilenameError, decode_filename
from src.progress.reporter import CatalogReporter

INVALID_POLICIES = ("skip", "abort")


def format_summary(count: int) -> str:
    """Format the catalog count, e.g. "Total 3 webtoons"."""
    return f"Total {count} webtoon{'' if count == 1 else 's'}"


@dataclass(frozen=True)
class Catalog:
    """Sorted, de-duplicated webtoons built from one directory listing."""

    webtoons: tuple[Webtoon, ...]
    skipped: tuple[str, ...] = ()

    @property
    def summary(self) -> str:
        return format_summary(len(self.webtoons))

    def __len__(self) -> int:
        return len(self.webtoons)

    def __iter__(self) -> Iterator[Webtoon]:
        return iter(self.webtoons)


class WebtoonCatalogBuilder:
    """Builds a webtoon catalog from directory entries."""

    def __init__(
        self,
        console: Console | None = None,
        on_invalid: str = "skip",
        dedupe_by_identity: bool = False,
        archive_check: Callable[[FileEntry], bool] = is_archive,
        show_progress: bool = False,
    ) -> None:
        """Initialize the catalog builder.

        Args:
            console: Rich console instance for output
            on_invalid: "skip" to warn and drop badly named archives,
                "abort" to raise on the first one
            dedupe_by_identity: Treat records with the same platform, title,
                authors and completion as duplicates even if the files differ
            archive_check: Predicate selecting archive entries
            show_progress: Show a progress bar while decoding
        """
        if on_invalid not in INVALID_POLICIES:
            raise ValueError(f"on_invalid must be one of {', '.join(INVALID_POLICIES)}, got '{on_invalid}'")

        self.reporter = CatalogReporter(console)
        self.on_invalid = on_invalid
        self.dedupe_by_identity = dedupe_by_identity
        self.archive_check = archive_check
        self.show_progress = show_progress

    def convert_entry(self, entry: FileEntry) -> Webtoon:
        """Convert an archive entry to a webtoon record.

        Args:
            entry: Archive file entry

        Returns:
            Webtoon decoded from the entry's base name

        Raises:
            InvalidFilenameError: If the base name cannot be decoded
        """
        decoded = decode_filename(entry.base_name)

        return Webtoon(
            title=decoded.title,
            authors=decoded.authors,
            platform=decoded.platform,
            completed=decoded.completed,
            creation_time=entry.creation_time,
            file_extension=entry.extension,
            size=entry.size,
        )

    def convert_entries(self, archives: list[FileEntry]) -> tuple[list[Webtoon], list[str]]:
        """Decode archives, applying the invalid file name policy.

        Args:
            archives: Archive entries to decode

        Returns:
            Tuple of (webtoons in decode order, names of skipped entries)

        Raises:
            InvalidFilenameError: If on_invalid is "abort" and a name is invalid
        """
        webtoons: list[Webtoon] = []
        skipped: list[str] = []

        def convert(entry: FileEntry) -> None:
            try:
                webtoons.append(self.convert_entry(entry))
            except InvalidFilenameError as e:
                if self.on_invalid == "abort":
                    raise
                self.reporter.display_warning(f"Skipping {entry.name}: {e.reason}")
                skipped.append(entry.name)

        if self.show_progress and archives:
            with self.reporter.track_decoding(len(archives)) as progress:
                for entry in archives:
                    progress.update(advance=0, description=f"Decoding {escape(entry.name)}")
                    convert(entry)
                    progress.update()
        else:
            for entry in archives:
                convert(entry)

        return webtoons, skipped

    def remove_duplicates(self, webtoons: Iterable[Webtoon]) -> list[Webtoon]:
        """Drop duplicate webtoons, keeping the first of each.

        Args:
            webtoons: Webtoons in decode order

        Returns:
            Webtoons without duplicates
        """
        seen: set[Hashable] = set()
        unique: list[Webtoon] = []

        for webtoon in webtoons:
            key = webtoon.identity if self.dedupe_by_identity else webtoon
            if key in seen:
                continue
            seen.add(key)
            unique.append(webtoon)

        return unique

    def sort_webtoons(self, webtoons: Iterable[Webtoon]) -> list[Webtoon]:
        """Sort webtoons by platform, then title. Ties keep their order."""
        return sorted(webtoons, key=lambda w: (w.platform, w.title))

    def build(self, entries: Iterable[FileEntry] | None) -> Catalog:
        """Build the catalog for a directory listing.

        Args:
            entries: Directory entries, None is treated as empty

        Returns:
            Catalog with sorted, de-duplicated webtoons

        Raises:
            InvalidFilenameError: If on_invalid is "abort" and a name is invalid
        """
        archives = [entry for entry in entries or () if self.archive_check(entry)]

        webtoons, skipped = self.convert_entries(archives)
        webtoons = self.sort_webtoons(self.remove_duplicates(webtoons))

        return Catalog(webtoons=tuple(webtoons), skipped=tuple(skipped))
