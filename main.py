#!/usr/bin/env python3
"""
Webtoon Catalog

A command-line tool for cataloguing webtoon archives in a directory.
Decodes platform, title, authors and completion from each archive name,
prints a sorted catalog and reports the latest webtoon list export.

Usage:
    uv run main.py [webtoon_folder]
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from rich.console import Console

from src.config import load_settings
from src.generators.webtoon_catalog import INVALID_POLICIES
from src.parsers.filename_decoder import InvalidFilenameError
from src.processors.catalog_processor import CatalogProcessor
from src.progress.reporter import CatalogReporter

# Initialize Rich console for output
console = Console()
reporter = CatalogReporter(console)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list, defaults to sys.argv

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Catalog webtoon archives in a folder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uv run main.py                          # Catalog the current directory (or WEBTOON_DIR)
  uv run main.py /path/to/webtoons        # Catalog a specific folder
  uv run main.py --on-invalid abort       # Stop on the first badly named archive
  uv run main.py --latest-only            # Only report the latest webtoon list export
        """
    )

    _ = parser.add_argument(
        "webtoon_folder",
        nargs="?",
        type=Path,
        help="Path to the folder to catalog (optional, defaults to WEBTOON_DIR or current directory)"
    )

    _ = parser.add_argument(
        "--on-invalid",
        choices=INVALID_POLICIES,
        default=None,
        help="What to do with archives whose names cannot be decoded (default: skip)"
    )

    _ = parser.add_argument(
        "--dedupe-by-identity",
        action="store_true",
        help="Treat archives of the same series as duplicates even if the files differ"
    )

    _ = parser.add_argument(
        "--latest-only",
        action="store_true",
        help="Only report the latest webtoon list export"
    )

    _ = parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output for debugging"
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the webtoon catalog."""
    args = parse_arguments(argv)

    verbose_mode: bool = getattr(args, 'verbose', False)
    if verbose_mode:
        console.print("[dim]Verbose mode enabled[/dim]")

    try:
        settings = load_settings()
    except ValueError as e:
        reporter.display_error("Invalid configuration", e)
        sys.exit(1)

    # Command-line flags override environment settings
    if args.on_invalid:
        settings = replace(settings, on_invalid=args.on_invalid)
    if args.dedupe_by_identity:
        settings = replace(settings, dedupe_by_identity=True)

    processor = CatalogProcessor(settings=settings, console=console)
    webtoon_folder: Path | None = getattr(args, 'webtoon_folder', None)

    try:
        if args.latest_only:
            entries = processor.scan(processor.resolve_directory(webtoon_folder))
            processor.display_latest_export(processor.find_latest_export(entries))
            return

        result = processor.process(webtoon_folder)
        processor.display_result(result)

    except (FileNotFoundError, NotADirectoryError) as e:
        reporter.display_error(str(e))
        sys.exit(1)
    except InvalidFilenameError as e:
        reporter.display_error(str(e))
        console.print("[dim]Rename the archive or run with --on-invalid skip[/dim]")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cataloguing interrupted by user.[/yellow]")
        sys.exit(1)
    except Exception as e:
        reporter.display_error("Critical error during cataloguing", e)
        if verbose_mode:
            import traceback
            console.print(f"[dim]{traceback.format_exc()}[/dim]")
        sys.exit(1)


if __name__ == "__main__":
    main()
