"""Azerbaijani profile."""

from __future__ import annotations

from autolang.languages.base import LanguageProfile

DIACRITICS = frozenset("əƏğĞıİöÖşŞüÜçÇ")

_COMMON_WORDS = frozenset(
    {
        "və",
        "bir",
        "iki",
        "üç",
        "bu",
        "nə",
        "necə",
        "üçün",
        "ilə",
        "deyil",
        "amma",
        "bəli",
        "xeyr",
        "salam",
        "təşəkkürlər",
        "sual",
        "cavab",
        "şəkil",
        "baxış",
        "istifadə",
        "istifadəçi",
        "hesab",
        "daxil",
        "çıxış",
        "profil",
        "səhifə",
        "qeydiyyat",
        "sən",
        "biz",
        "onlar",
        "mən",
        "burada",
        "orada",
        "bunun",
        "bundan",
        "hansı",
        "niyə",
        "çünki",
        "gərək",
        "edək",
        "yazın",
        "yüklənir",
        "göndər",
        "qəbul",
        "et",
        "sil",
        "admin",
        "super_admin",
        "kateqoriya",
        "bəhs",
        "mövzu",
        "rəy",
        "mesaj",
        "dost",
        "like",
        "paylaş",
    }
)

# Order matters: scanning stops at the first match.
_SUFFIXES = (
    "lar",
    "lər",
    "da",
    "də",
    "dan",
    "dən",
    "in",
    "ın",
    "un",
    "ün",
    "im",
    "ım",
    "um",
    "üm",
    "dir",
    "dır",
    "dur",
    "dür",
    "mış",
    "miş",
    "muş",
    "müş",
    "acaq",
    "əcək",
    "maq",
    "mək",
    "sız",
    "siz",
    "suz",
    "süz",
    "lığ",
    "liy",
    "luğu",
    "liyi",
)

AZERBAIJANI = LanguageProfile(
    code="az",
    name="Azerbaijani",
    common_words=_COMMON_WORDS,
    suffixes=_SUFFIXES,
)
