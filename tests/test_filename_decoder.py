import pytest

from src.parsers.filename_decoder import (
    DecodedFilename,
    InvalidFilenameError,
    decode_filename,
)


def test_decodes_completed_webtoon_with_known_platform() -> None:
    decoded = decode_filename("NAVER_Some Title - Author A,Author B [完]")

    assert decoded == DecodedFilename(
        platform="Naver Webtoon",
        title="Some Title",
        authors="Author A,Author B",
        completed=True,
    )


def test_decodes_ongoing_webtoon() -> None:
    decoded = decode_filename("DAUM_Misaeng - Yoon Tae-ho")

    assert decoded.platform == "Daum Webtoon"
    assert decoded.title == "Misaeng"
    assert decoded.authors == "Yoon Tae-ho"
    assert decoded.completed is False


def test_unknown_platform_passes_through() -> None:
    decoded = decode_filename("XYZ_Some Title - Author")

    assert decoded.platform == "XYZ"
    assert decoded.title == "Some Title"


def test_platform_lookup_is_case_sensitive() -> None:
    assert decode_filename("naver_Title - Author").platform == "naver"


def test_title_may_contain_title_delimiter() -> None:
    decoded = decode_filename("LEZHIN_Part 1 - The Beginning - Kim/Lee")

    assert decoded.title == "Part 1 - The Beginning"
    assert decoded.authors == "Kim/Lee"


def test_title_may_contain_platform_delimiter() -> None:
    decoded = decode_filename("KAKAO_Solo_Leveling - Chugong [完]")

    assert decoded.platform == "KakaoPage"
    assert decoded.title == "Solo_Leveling"
    assert decoded.authors == "Chugong"


@pytest.mark.parametrize(("filename", "completed"), [
    ("NAVER_Title - ", False),
    ("NAVER_Title -  [完]", True),
    ("NAVER_Title - [完]", True),
])
def test_empty_authors_are_valid(filename: str, completed: bool) -> None:
    decoded = decode_filename(filename)

    assert decoded.authors == ""
    assert decoded.completed is completed


def test_completed_marker_must_be_at_the_end() -> None:
    decoded = decode_filename("NAVER_Title - Author [完] extra")

    assert decoded.completed is False
    assert decoded.authors == "Author [完] extra"


def test_missing_platform_delimiter_raises() -> None:
    with pytest.raises(InvalidFilenameError) as exc_info:
        decode_filename("Tower of God - SIU")

    assert exc_info.value.filename == "Tower of God - SIU"
    assert "platform delimiter" in exc_info.value.reason


def test_missing_title_delimiter_raises() -> None:
    with pytest.raises(InvalidFilenameError, match="title delimiter"):
        decode_filename("NAVER_Tower of God")


def test_empty_title_raises() -> None:
    with pytest.raises(InvalidFilenameError, match="empty title"):
        decode_filename("NAVER_ - SIU")


def test_invalid_filename_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        decode_filename("no delimiters at all")


def test_decoding_is_deterministic() -> None:
    filename = "TOOMICS_Same Title - Someone [完]"
    assert decode_filename(filename) == decode_filename(filename)


@pytest.mark.parametrize(("acronym", "title", "authors"), [
    ("NAVER", "Tower of God", "SIU"),
    ("COMICO", "ReLIFE", "Yayoiso"),
    ("UNKNOWN", "A - B", ""),
])
def test_recovers_title_and_authors_from_composed_name(acronym: str, title: str, authors: str) -> None:
    decoded = decode_filename(f"{acronym}_{title} - {authors} [完]")

    assert decoded.title == title
    assert decoded.authors == authors
    assert decoded.completed is True
