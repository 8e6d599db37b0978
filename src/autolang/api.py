"""HTTP API for autolang."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse

from autolang import __version__
from autolang.config import load_config
from autolang.core import annotate_text, classify_tokens
from autolang.io import to_html
from autolang.models import (
    AnnotateRequest,
    AnnotateResponse,
    ClassifyRequest,
    ClassifyResponse,
    HealthResponse,
)


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="autolang",
        version=__version__,
        description="Per-token Azerbaijani/English language tagging API.",
    )
    config = load_config()

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=config.env)

    @app.post("/v1/annotate", response_model=AnnotateResponse, tags=["annotation"])
    def annotate(request: AnnotateRequest) -> AnnotateResponse:
        return annotate_text(request)

    @app.post("/v1/annotate/html", response_class=HTMLResponse, tags=["annotation"])
    def annotate_html(
        request: AnnotateRequest,
        tag: str = "p",
        class_name: str | None = None,
    ) -> str:
        try:
            return to_html(annotate_text(request), tag=tag, class_name=class_name)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    @app.post("/v1/classify", response_model=ClassifyResponse, tags=["annotation"])
    def classify(request: ClassifyRequest) -> ClassifyResponse:
        return classify_tokens(request)

    return app


app = create_app()
