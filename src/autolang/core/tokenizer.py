"""Lossless whitespace tokenizer and punctuation stripping."""

from __future__ import annotations

import re

import regex

_WHITESPACE_SPLIT_RE = re.compile(r"(\s+)")
_WHITESPACE_RE = re.compile(r"\s*")
_LEADING_PUNCT_RE = regex.compile(r"^[\p{P}\p{S}]+")
_TRAILING_PUNCT_RE = regex.compile(r"[\p{P}\p{S}]+$")


def tokenize(text: str) -> list[str]:
    """Split text into alternating non-whitespace and whitespace segments.

    Zero-length segments at the boundaries are kept, so
    ``"".join(tokenize(text)) == text`` holds for every input.
    """
    return _WHITESPACE_SPLIT_RE.split(text)


def is_whitespace(segment: str) -> bool:
    """True for whitespace runs and zero-length segments."""
    return _WHITESPACE_RE.fullmatch(segment) is not None


def strip_punctuation(token: str) -> str:
    """Remove leading and trailing Unicode punctuation and symbols."""
    return _TRAILING_PUNCT_RE.sub("", _LEADING_PUNCT_RE.sub("", token))
