"""Annotation output serializers."""

from __future__ import annotations

import html
import re
from pathlib import Path

from autolang.models import AnnotateResponse

_TAG_NAME_RE = re.compile(r"[a-z][a-z0-9]*")


def to_json(response: AnnotateResponse) -> str:
    """Serialize an annotation response to formatted JSON."""
    return response.model_dump_json(indent=2)


def write_json(response: AnnotateResponse, output_path: str | Path) -> None:
    """Write annotation response JSON to disk."""
    write_text(to_json(response), output_path)


def to_html(
    response: AnnotateResponse,
    *,
    tag: str = "p",
    class_name: str | None = None,
) -> str:
    """Render segments as ``<span lang="..">`` inside a single element.

    Whitespace is emitted verbatim; token text is HTML-escaped.
    """
    if not _TAG_NAME_RE.fullmatch(tag):
        raise ValueError(f"invalid HTML tag name: {tag!r}")

    parts: list[str] = []
    for segment in response.segments:
        if segment.lang is None:
            parts.append(segment.text)
        else:
            parts.append(f'<span lang="{segment.lang}">{html.escape(segment.text)}</span>')

    class_attr = f' class="{html.escape(class_name, quote=True)}"' if class_name else ""
    return f"<{tag}{class_attr}>{''.join(parts)}</{tag}>"


def write_html(
    response: AnnotateResponse,
    output_path: str | Path,
    *,
    tag: str = "p",
    class_name: str | None = None,
) -> None:
    """Write rendered HTML to disk."""
    write_text(to_html(response, tag=tag, class_name=class_name), output_path)


def write_text(content: str, output_path: str | Path) -> None:
    """Write rendered output to disk, creating parent directories."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content + "\n", encoding="utf-8")
