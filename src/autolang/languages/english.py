"""English profile."""

from __future__ import annotations

from autolang.languages.base import LanguageProfile

_COMMON_WORDS = frozenset(
    {
        "the",
        "and",
        "of",
        "to",
        "in",
        "is",
        "it",
        "you",
        "that",
        "for",
        "on",
        "with",
        "as",
        "i",
        "this",
        "be",
        "at",
        "by",
        "not",
        "are",
        "or",
        "from",
        "your",
        "have",
        "more",
        "can",
        "click",
        "view",
        "submit",
        "save",
        "send",
        "accept",
        "delete",
        "admin",
        "category",
        "image",
        "answer",
        "question",
        "page",
        "profile",
        "login",
        "logout",
        "register",
        "share",
        "like",
        "comment",
    }
)

_SUFFIXES = (
    "ing",
    "ed",
    "tion",
    "sion",
    "ness",
    "ment",
    "ers",
    "ies",
    "able",
    "ible",
    "ally",
    "ize",
    "ise",
    "ful",
    "less",
    "est",
    "er",
    "ly",
    "s",
)

ENGLISH = LanguageProfile(
    code="en",
    name="English",
    common_words=_COMMON_WORDS,
    suffixes=_SUFFIXES,
)
