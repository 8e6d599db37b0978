"""Tokenization, classification and annotation."""

from autolang.core.classifier import CLASSIFIER_ID, TokenScore, classify, score_token
from autolang.core.pipeline import annotate_text, classify_tokens
from autolang.core.tokenizer import is_whitespace, strip_punctuation, tokenize

__all__ = [
    "CLASSIFIER_ID",
    "TokenScore",
    "annotate_text",
    "classify",
    "classify_tokens",
    "is_whitespace",
    "score_token",
    "strip_punctuation",
    "tokenize",
]
