"""Rule-based Azerbaijani/English token classifier.

Every rule adds a fixed weight to one side and never subtracts. English is
the null hypothesis for tokens without linguistic content (URLs, emails,
numbers); ties between the two scores go to Azerbaijani.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from autolang.core.tokenizer import strip_punctuation
from autolang.languages import AZERBAIJANI, DIACRITICS, ENGLISH, LanguageCode

CLASSIFIER_ID = "az-en-heuristic-v1"

Resolution = Literal["url", "email", "numeric", "empty_core", "fallback", "score"]

_URL_RE = re.compile(r"(?:https?://|www\.)", re.IGNORECASE)
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_NUMERIC_RE = re.compile(r"[-+]?[0-9]+[0-9,.%]*")
_ASCII_LETTER_RE = re.compile(r"[A-Za-z]")
_NON_LETTER_RE = re.compile(r"[^a-zA-ZəğıöşüçƏĞİÖŞÜÇ]")
_VOWEL_CLUSTER_RE = re.compile(r"[aeiou]{2}", re.IGNORECASE)

_LONG_WORD_MIN_LETTERS = 6


@dataclass(frozen=True)
class TokenScore:
    """Breakdown of a single classification."""

    token: str
    core: str
    score_az: int
    score_en: int
    rules: tuple[str, ...]
    resolution: Resolution
    language: LanguageCode


def classify(token: str) -> LanguageCode:
    """Return ``"az"`` or ``"en"`` for one non-whitespace token."""
    return score_token(token).language


@lru_cache(maxsize=4096)
def score_token(token: str) -> TokenScore:
    """Evaluate every rule against `token` and resolve the language."""
    fast_path = _fast_path(token)
    if fast_path is not None:
        return TokenScore(token, token, 0, 0, (), fast_path, "en")

    core = strip_punctuation(token)
    if not core:
        return TokenScore(token, core, 0, 0, (), "empty_core", "az")

    lower = core.lower()
    has_diacritic = _contains_diacritic(core)
    has_ascii_letter = _ASCII_LETTER_RE.search(core) is not None

    score_az = 0
    score_en = 0
    fired: list[str] = []

    if has_diacritic:
        score_az += 4
        fired.append("diacritic")
    if has_ascii_letter and not has_diacritic:
        score_en += 2
        fired.append("plain_latin")

    if AZERBAIJANI.is_common_word(lower):
        score_az += 5
        fired.append("lexicon_az")
    if ENGLISH.is_common_word(lower):
        score_en += 5
        fired.append("lexicon_en")

    if AZERBAIJANI.matching_suffix(lower) is not None:
        score_az += 2
        fired.append("suffix_az")
    if ENGLISH.matching_suffix(lower) is not None:
        score_en += 2
        fired.append("suffix_en")

    if "th" in lower:
        score_en += 2
        fired.append("digraph_th")
    if "wh" in lower:
        score_en += 1
        fired.append("digraph_wh")
    if "tion" in lower or "sion" in lower:
        score_en += 2
        fired.append("tion_sion")

    is_long = len(_NON_LETTER_RE.sub("", lower)) >= _LONG_WORD_MIN_LETTERS
    if is_long and _contains_diacritic(lower):
        score_az += 1
        fired.append("long_diacritic")
    if is_long and _VOWEL_CLUSTER_RE.search(lower) is not None:
        score_en += 1
        fired.append("long_vowel_cluster")

    if score_az == 0 and score_en == 0:
        lower_has_ascii = _ASCII_LETTER_RE.search(lower) is not None
        language: LanguageCode = (
            "en" if lower_has_ascii and not _contains_diacritic(lower) else "az"
        )
        return TokenScore(token, core, 0, 0, (), "fallback", language)

    language = "az" if score_az >= score_en else "en"
    return TokenScore(token, core, score_az, score_en, tuple(fired), "score", language)


def _fast_path(token: str) -> Resolution | None:
    if _URL_RE.match(token):
        return "url"
    if _EMAIL_RE.fullmatch(token):
        return "email"
    if _NUMERIC_RE.fullmatch(token):
        return "numeric"
    return None


def _contains_diacritic(text: str) -> bool:
    return any(char in DIACRITICS for char in text)
