"""Token-level accuracy metrics for the classifier."""

from __future__ import annotations

from dataclasses import dataclass

from autolang.core import classify
from autolang.languages import LanguageCode

_LANGUAGES: tuple[LanguageCode, ...] = ("az", "en")


@dataclass(frozen=True)
class LabeledToken:
    """Reference language annotation for one token."""

    token: str
    language: LanguageCode


def evaluate_tokens(cases: list[LabeledToken]) -> dict[str, object]:
    """Classify every reference token and summarize agreement."""
    predicted = [classify(case.token) for case in cases]
    reference = [case.language for case in cases]
    return summarize_predictions(predicted, reference)


def summarize_predictions(
    predicted: list[LanguageCode],
    reference: list[LanguageCode],
) -> dict[str, object]:
    """Accuracy, per-language precision/recall/F1 and a confusion matrix."""
    if len(predicted) != len(reference):
        raise ValueError(
            f"predicted and reference lengths differ: {len(predicted)} != {len(reference)}"
        )

    confusion = {gold: {pred: 0 for pred in _LANGUAGES} for gold in _LANGUAGES}
    for pred, gold in zip(predicted, reference):
        confusion[gold][pred] += 1

    correct = sum(confusion[lang][lang] for lang in _LANGUAGES)
    total = len(reference)
    per_language = {lang: _language_scores(confusion, lang) for lang in _LANGUAGES}
    macro_f1 = sum(scores["f1"] for scores in per_language.values()) / len(_LANGUAGES)

    return {
        "accuracy": round(correct / total, 4) if total else 0.0,
        "macro_f1": round(macro_f1, 4),
        "token_count": total,
        "per_language": per_language,
        "confusion": confusion,
    }


def _language_scores(confusion: dict[str, dict[str, int]], lang: str) -> dict[str, float]:
    true_positive = confusion[lang][lang]
    predicted_total = sum(confusion[gold][lang] for gold in _LANGUAGES)
    support = sum(confusion[lang].values())

    precision = true_positive / predicted_total if predicted_total else 0.0
    recall = true_positive / support if support else 0.0
    f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0
    return {
        "precision": round(precision, 4),
        "recall": round(recall, 4),
        "f1": round(f1, 4),
        "support": float(support),
    }
