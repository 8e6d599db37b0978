import pytest

from autolang.languages import AZERBAIJANI, DIACRITICS, ENGLISH, resolve_language_profile


def test_resolve_language_profile_aliases() -> None:
    assert resolve_language_profile("az") is AZERBAIJANI
    assert resolve_language_profile("az-Latn-AZ") is AZERBAIJANI
    assert resolve_language_profile("EN_us") is ENGLISH
    assert resolve_language_profile("en-GB").name == "English"


def test_resolve_unknown_language_raises() -> None:
    with pytest.raises(ValueError, match="unsupported language code"):
        resolve_language_profile("fr")


def test_suffix_scan_returns_first_match_in_list_order() -> None:
    assert ENGLISH.matching_suffix("walkers") == "ers"
    assert AZERBAIJANI.matching_suffix("evlərdən") == "dən"
    assert AZERBAIJANI.matching_suffix("hello") is None


def test_lexicons_are_lowercase() -> None:
    for profile in (AZERBAIJANI, ENGLISH):
        assert all(word == word.lower() for word in profile.common_words)
        assert all(suffix == suffix.lower() for suffix in profile.suffixes)


def test_diacritics_cover_both_cases() -> None:
    assert {"ə", "Ə", "ı", "İ", "ş", "Ş"} <= DIACRITICS
    assert len(DIACRITICS) == 14
