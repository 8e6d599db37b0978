"""Evaluation utilities."""

from autolang.eval.metrics import LabeledToken, evaluate_tokens, summarize_predictions

__all__ = ["LabeledToken", "evaluate_tokens", "summarize_predictions"]
