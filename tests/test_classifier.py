import pytest

from autolang.core import classify, score_token


@pytest.mark.parametrize(
    ("token", "resolution"),
    [
        ("https://example.com", "url"),
        ("WWW.Sayt.az", "url"),
        ("user@example.com", "email"),
        ("12,345.67%", "numeric"),
        ("-42", "numeric"),
    ],
)
def test_fast_path_tokens_are_english(token: str, resolution: str) -> None:
    score = score_token(token)
    assert classify(token) == "en"
    assert score.resolution == resolution
    assert score.rules == ()


def test_lexicon_hits() -> None:
    salam = score_token("salam")
    assert salam.language == "az"
    assert (salam.score_az, salam.score_en) == (5, 2)
    assert salam.rules == ("plain_latin", "lexicon_az")

    assert classify("the") == "en"
    assert score_token("the").score_en == 9


def test_lexicon_lookup_ignores_case_and_punctuation() -> None:
    assert classify("SALAM") == "az"
    assert classify("Salam,") == "az"
    assert classify("THE") == "en"


def test_diacritic_dominates_english_suffix() -> None:
    assert classify("İstifadəçi") == "az"
    score = score_token("çeking")
    assert "suffix_en" in score.rules
    assert (score.score_az, score.score_en) == (5, 2)
    assert score.language == "az"


def test_pure_punctuation_is_azerbaijani() -> None:
    score = score_token("!!!")
    assert score.core == ""
    assert score.resolution == "empty_core"
    assert score.language == "az"


def test_empty_token_is_azerbaijani() -> None:
    assert classify("") == "az"


def test_tie_favors_azerbaijani() -> None:
    score = score_token("thəs")
    assert score.score_az == score.score_en == 4
    assert score.rules == ("diacritic", "suffix_en", "digraph_th")
    assert score.language == "az"


def test_tie_without_diacritics_favors_azerbaijani() -> None:
    score = score_token("kitablar")
    assert (score.score_az, score.score_en) == (2, 2)
    assert score.language == "az"


def test_suffix_bonus_applies_once() -> None:
    score = score_token("walkers")
    assert score.rules == ("plain_latin", "suffix_en")
    assert score.score_en == 4


def test_english_digraph_and_pattern_rules() -> None:
    whether = score_token("whether")
    assert whether.rules == ("plain_latin", "suffix_en", "digraph_th", "digraph_wh")
    assert whether.score_en == 7

    information = score_token("information")
    assert information.rules == (
        "plain_latin",
        "suffix_en",
        "tion_sion",
        "long_vowel_cluster",
    )
    assert information.score_en == 7


def test_long_word_rules() -> None:
    beautiful = score_token("beautiful")
    assert "long_vowel_cluster" in beautiful.rules
    assert beautiful.score_en == 5

    muellim = score_token("müəllim")
    assert muellim.rules == ("diacritic", "suffix_az", "long_diacritic")
    assert muellim.score_az == 7


def test_vowel_cluster_ignores_diacritic_vowels() -> None:
    assert "long_vowel_cluster" not in score_token("müəllimlər").rules


@pytest.mark.parametrize("token", ["привет", "١٢٣", "日本語"])
def test_unscored_scripts_fall_back_to_azerbaijani(token: str) -> None:
    score = score_token(token)
    assert score.resolution == "fallback"
    assert score.language == "az"


def test_classify_is_deterministic() -> None:
    for token in ["salam", "the", "walkers", "müəllim", "!!!"]:
        assert classify(token) == classify(token)


def test_mixed_sentence_tags() -> None:
    tokens = ["Salam,", "how", "are", "you?"]
    assert [classify(token) for token in tokens] == ["az", "en", "en", "en"]


def test_azerbaijani_suffix_bonus_applies_once() -> None:
    score = score_token("evlərdən")
    assert score.rules.count("suffix_az") == 1
    assert score.rules == ("diacritic", "suffix_az", "long_diacritic")
    assert score.score_az == 7


def test_fallback_checks_lowercased_core() -> None:
    score = score_token("\u212a")
    assert score.resolution == "fallback"
    assert score.language == "en"
