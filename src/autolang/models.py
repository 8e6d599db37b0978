"""Shared data models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from autolang.languages import LanguageCode


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class AnnotateRequest(BaseModel):
    """Annotation request payload used by both CLI and API."""

    text: str
    explain: bool = False


class TokenExplanation(BaseModel):
    """Per-rule scoring detail for one token."""

    core: str
    score_az: int = Field(ge=0)
    score_en: int = Field(ge=0)
    rules: list[str]
    resolution: Literal["url", "email", "numeric", "empty_core", "fallback", "score"]


class AnnotatedSegment(BaseModel):
    """One segment of the input; whitespace segments carry no language."""

    index: int = Field(ge=0)
    text: str = Field(min_length=1)
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    lang: LanguageCode | None = None
    explanation: TokenExplanation | None = None

    @property
    def is_whitespace(self) -> bool:
        return self.lang is None


class AnnotationMetadata(BaseModel):
    """Metadata describing how an annotation was produced."""

    classifier_id: str
    segment_count: int = Field(ge=0)
    token_count: int = Field(ge=0)
    az_token_count: int = Field(ge=0)
    en_token_count: int = Field(ge=0)
    dominant_language: LanguageCode | None
    generated_at: datetime


class AnnotateResponse(BaseModel):
    """Canonical annotation output schema."""

    metadata: AnnotationMetadata
    segments: list[AnnotatedSegment]

    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)


class ClassifyRequest(BaseModel):
    """Batch token classification request."""

    tokens: list[str] = Field(min_length=1)
    explain: bool = False

    @field_validator("tokens")
    @classmethod
    def tokens_are_words(cls, tokens: list[str]) -> list[str]:
        for token in tokens:
            if not token.strip() or any(char.isspace() for char in token):
                raise ValueError("tokens must be non-empty and contain no whitespace")
        return tokens


class TokenClassification(BaseModel):
    """Language tag for a single token."""

    token: str
    lang: LanguageCode
    explanation: TokenExplanation | None = None


class ClassifyResponse(BaseModel):
    """Batch token classification result."""

    classifier_id: str
    results: list[TokenClassification]
