"""Main catalog processing orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import final

from rich.console import Console

from src.config import Settings, load_settings
from src.finders.latest_export import find_latest_export
from src.generators.webtoon_catalog import Catalog, WebtoonCatalogBuilder
from src.models.file_entry import FileEntry
from src.progress.reporter import CatalogReporter
from src.scanners.directory_scanner import get_current_path, scan_directory


@dataclass(frozen=True)
class CatalogResult:
    """Outcome of processing one directory."""

    directory: Path
    catalog: Catalog
    latest_export: str | None


@final
class CatalogProcessor:
    """Scans a webtoon directory, builds its catalog and finds the latest export."""

    def __init__(
        self,
        settings: Settings | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize the catalog processor.

        Args:
            settings: Catalog settings, loaded from the environment if None
            console: Rich console instance
        """
        self.settings = settings or load_settings()
        self.console = console or Console()
        self.reporter = CatalogReporter(self.console)
        self.builder = WebtoonCatalogBuilder(
            console=self.console,
            on_invalid=self.settings.on_invalid,
            dedupe_by_identity=self.settings.dedupe_by_identity,
            show_progress=True,
        )

    def resolve_directory(self, directory: Path | None = None) -> Path:
        """Pick the directory to scan: argument, then WEBTOON_DIR, then cwd."""
        return directory or self.settings.webtoon_dir or get_current_path()

    def scan(self, directory: Path) -> list[FileEntry]:
        """List the entries of a directory.

        Raises:
            FileNotFoundError: If the directory does not exist
            NotADirectoryError: If the path is not a directory
        """
        self.reporter.display_info(f"Scanning folder: {directory}")
        entries = scan_directory(directory, self.settings.time_format)
        self.reporter.display_info(f"Found {len(entries)} entries")
        return entries

    def find_latest_export(self, entries: list[FileEntry]) -> str | None:
        return find_latest_export(
            entries,
            prefix=self.settings.export_prefix,
            extension=self.settings.export_extension,
        )

    def process(self, directory: Path | None = None) -> CatalogResult:
        """Build the catalog and find the latest export for a directory.

        Args:
            directory: Directory to scan, see resolve_directory

        Returns:
            CatalogResult for the directory

        Raises:
            FileNotFoundError: If the directory does not exist
            NotADirectoryError: If the path is not a directory
            InvalidFilenameError: If on_invalid is "abort" and a name is invalid
        """
        target = self.resolve_directory(directory)
        entries = self.scan(target)

        catalog = self.builder.build(entries)
        if catalog.skipped:
            self.reporter.display_warning(
                f"Skipped {len(catalog.skipped)} archive(s) with invalid names"
            )

        return CatalogResult(
            directory=target,
            catalog=catalog,
            latest_export=self.find_latest_export(entries),
        )

    def display_result(self, result: CatalogResult) -> None:
        """Print the catalog table, summary and latest export."""
        self.reporter.display_catalog(result.catalog.webtoons, result.catalog.summary)
        self.display_latest_export(result.latest_export)

    def display_latest_export(self, latest_export: str | None) -> None:
        if latest_export:
            self.reporter.display_success(f"Latest webtoon list export: {latest_export}")
        else:
            self.reporter.display_warning("No webtoon list export found")
