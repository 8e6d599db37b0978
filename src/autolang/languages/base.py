"""Language profile base types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

LanguageCode = Literal["az", "en"]


@dataclass(frozen=True)
class LanguageProfile:
    """Static lexical cues for one target language."""

    code: LanguageCode
    name: str
    common_words: frozenset[str]
    suffixes: tuple[str, ...]

    def is_common_word(self, lowered: str) -> bool:
        return lowered in self.common_words

    def matching_suffix(self, lowered: str) -> str | None:
        """Return the first suffix in list order that ends `lowered`."""
        for suffix in self.suffixes:
            if lowered.endswith(suffix):
                return suffix
        return None
