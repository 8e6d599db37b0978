"""Language profile registry and resolution."""

from __future__ import annotations

from autolang.languages.azerbaijani import AZERBAIJANI
from autolang.languages.base import LanguageProfile
from autolang.languages.english import ENGLISH

_LANGUAGE_PROFILES: dict[str, LanguageProfile] = {
    "az": AZERBAIJANI,
    "en": ENGLISH,
}

_ALIASES = {
    "aze": "az",
    "az-az": "az",
    "az-latn": "az",
    "az-latn-az": "az",
    "eng": "en",
    "en-us": "en",
    "en-gb": "en",
    "en-ca": "en",
    "en-au": "en",
}


def resolve_language_profile(language_code: str) -> LanguageProfile:
    """Resolve a language code or regional alias to its profile."""
    folded = language_code.strip().casefold().replace("_", "-")
    canonical = _ALIASES.get(folded, folded)
    try:
        return _LANGUAGE_PROFILES[canonical]
    except KeyError:
        raise ValueError(f"unsupported language code: {language_code!r}") from None
