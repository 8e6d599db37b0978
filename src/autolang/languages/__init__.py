"""Language profiles for the two target languages."""

from autolang.languages.azerbaijani import AZERBAIJANI, DIACRITICS
from autolang.languages.base import LanguageCode, LanguageProfile
from autolang.languages.english import ENGLISH
from autolang.languages.registry import resolve_language_profile

__all__ = [
    "AZERBAIJANI",
    "DIACRITICS",
    "ENGLISH",
    "LanguageCode",
    "LanguageProfile",
    "resolve_language_profile",
]
