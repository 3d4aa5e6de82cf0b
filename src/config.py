"""Runtime settings loaded from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from src.finders.latest_export import DEFAULT_EXPORT_EXTENSION, DEFAULT_EXPORT_PREFIX
from src.generators.webtoon_catalog import INVALID_POLICIES
from src.models.file_entry import DEFAULT_TIME_FORMAT


@dataclass
class Settings:
    """Catalog settings."""

    webtoon_dir: Path | None
    export_prefix: str
    export_extension: str
    time_format: str
    on_invalid: str
    dedupe_by_identity: bool


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """Load settings from environment variables and the .env file.

    Returns:
        Settings populated from WEBTOON_* variables, with defaults

    Raises:
        ValueError: If WEBTOON_ON_INVALID is not a known policy
    """
    _ = load_dotenv()

    webtoon_dir = os.getenv("WEBTOON_DIR")
    on_invalid = os.getenv("WEBTOON_ON_INVALID", "skip").strip().lower()
    if on_invalid not in INVALID_POLICIES:
        raise ValueError(
            f"WEBTOON_ON_INVALID must be one of {', '.join(INVALID_POLICIES)}, got '{on_invalid}'"
        )

    return Settings(
        webtoon_dir=Path(webtoon_dir) if webtoon_dir else None,
        export_prefix=os.getenv("WEBTOON_EXPORT_PREFIX", DEFAULT_EXPORT_PREFIX),
        export_extension=os.getenv("WEBTOON_EXPORT_EXTENSION", DEFAULT_EXPORT_EXTENSION),
        time_format=os.getenv("WEBTOON_TIME_FORMAT", DEFAULT_TIME_FORMAT),
        on_invalid=on_invalid,
        dedupe_by_identity=_env_flag("WEBTOON_DEDUPE_BY_IDENTITY"),
    )
