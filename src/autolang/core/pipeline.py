"""Text annotation pipeline."""

from __future__ import annotations

import logging
from collections import Counter
from datetime import UTC, datetime

from autolang.core.classifier import CLASSIFIER_ID, TokenScore, score_token
from autolang.core.tokenizer import is_whitespace, tokenize
from autolang.languages import LanguageCode
from autolang.models import (
    AnnotatedSegment,
    AnnotateRequest,
    AnnotateResponse,
    AnnotationMetadata,
    ClassifyRequest,
    ClassifyResponse,
    TokenClassification,
    TokenExplanation,
)

logger = logging.getLogger(__name__)


def annotate_text(request: AnnotateRequest) -> AnnotateResponse:
    """Tag every non-whitespace segment of the request text."""
    segments: list[AnnotatedSegment] = []
    counts: Counter[str] = Counter()
    offset = 0

    for piece in tokenize(request.text):
        if not piece:
            continue
        start, offset = offset, offset + len(piece)
        if is_whitespace(piece):
            segments.append(
                AnnotatedSegment(index=len(segments), text=piece, start=start, end=offset)
            )
            continue

        score = score_token(piece)
        counts[score.language] += 1
        segments.append(
            AnnotatedSegment(
                index=len(segments),
                text=piece,
                start=start,
                end=offset,
                lang=score.language,
                explanation=_explain(score) if request.explain else None,
            )
        )

    token_count = counts["az"] + counts["en"]
    logger.debug(
        "annotated %d segments (%d az, %d en)", len(segments), counts["az"], counts["en"]
    )
    metadata = AnnotationMetadata(
        classifier_id=CLASSIFIER_ID,
        segment_count=len(segments),
        token_count=token_count,
        az_token_count=counts["az"],
        en_token_count=counts["en"],
        dominant_language=_dominant_language(counts["az"], counts["en"]),
        generated_at=datetime.now(UTC),
    )
    return AnnotateResponse(metadata=metadata, segments=segments)


def classify_tokens(request: ClassifyRequest) -> ClassifyResponse:
    """Classify a batch of standalone tokens."""
    results = []
    for token in request.tokens:
        score = score_token(token)
        results.append(
            TokenClassification(
                token=token,
                lang=score.language,
                explanation=_explain(score) if request.explain else None,
            )
        )
    return ClassifyResponse(classifier_id=CLASSIFIER_ID, results=results)


def _dominant_language(az_count: int, en_count: int) -> LanguageCode | None:
    if az_count == 0 and en_count == 0:
        return None
    return "az" if az_count >= en_count else "en"


def _explain(score: TokenScore) -> TokenExplanation:
    return TokenExplanation(
        core=score.core,
        score_az=score.score_az,
        score_en=score.score_en,
        rules=list(score.rules),
        resolution=score.resolution,
    )
