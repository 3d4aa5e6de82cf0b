"""Known webtoon platforms."""

from __future__ import annotations

from enum import Enum


class Platform(Enum):
    """Platforms a webtoon can be downloaded from, keyed by file name acronym."""

    NAVER = "Naver Webtoon"
    DAUM = "Daum Webtoon"
    KAKAO = "KakaoPage"
    LEZHIN = "Lezhin Comics"
    TOOMICS = "Toomics"
    TOPTOON = "Toptoon"
    COMICO = "Comico"
    MRBLUE = "Mr.Blue"
    BOMTOON = "Bomtoon"

    @property
    def acronym(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def display_name_for(cls, acronym: str) -> str:
        """Resolve an acronym to its display name.

        Args:
            acronym: Acronym as written in the file name (exact, case-sensitive)

        Returns:
            The platform display name, or the acronym unchanged if unknown
        """
        platform = cls.__members__.get(acronym)
        return platform.display_name if platform is not None else acronym
