from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import write_zip


@pytest.fixture
def webtoon_dir(tmp_path: Path) -> Path:
    """Folder with valid archives, a fake archive, exports and a subfolder."""
    write_zip(tmp_path / "NAVER_Tower of God - SIU [完].zip")
    write_zip(tmp_path / "DAUM_Misaeng - Yoon Tae-ho.zip")
    write_zip(tmp_path / "LEZHIN_Killing Stalking - Koogi [完].cbz")
    (tmp_path / "NAVER_Not Really - A Zip.zip").write_text("plain text")
    (tmp_path / "webtoon_list_20230101000000.xlsx").write_bytes(b"xlsx")
    (tmp_path / "webtoon_list_20231231235959.xlsx").write_bytes(b"xlsx")
    (tmp_path / "Chapters").mkdir()
    return tmp_path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep WEBTOON_* variables from the host out of the tests."""
    for name in (
        "WEBTOON_DIR",
        "WEBTOON_EXPORT_PREFIX",
        "WEBTOON_EXPORT_EXTENSION",
        "WEBTOON_TIME_FORMAT",
        "WEBTOON_ON_INVALID",
        "WEBTOON_DEDUPE_BY_IDENTITY",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("src.config.load_dotenv", lambda *args, **kwargs: False)
