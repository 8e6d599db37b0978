"""CLI entrypoint for autolang."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from autolang.config import configure_logging, load_config
from autolang.core import annotate_text, classify_tokens
from autolang.io import to_html, to_json, write_text
from autolang.models import AnnotateRequest, ClassifyRequest


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="autolang",
        description="Per-token Azerbaijani/English language tagger.",
    )
    subparsers = parser.add_subparsers(dest="command")

    annotate = subparsers.add_parser("annotate", help="Tag every token of a text")
    annotate.add_argument("text", help="Text to annotate or path to a UTF-8 text file")
    annotate.add_argument(
        "--format",
        choices=["json", "html"],
        default="json",
        help="Output format (default: json)",
    )
    annotate.add_argument("--tag", default="p", help="Wrapping HTML element (default: p)")
    annotate.add_argument("--class-name", default=None, help="CSS class for the HTML element")
    annotate.add_argument(
        "--explain",
        action="store_true",
        help="Include per-rule scores for every token",
    )
    annotate.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output path. If omitted, prints to stdout.",
    )

    classify = subparsers.add_parser("classify", help="Classify standalone tokens")
    classify.add_argument("tokens", nargs="+", help="Tokens to classify")
    classify.add_argument(
        "--explain",
        action="store_true",
        help="Print per-rule scores next to each tag",
    )

    serve = subparsers.add_parser("serve", help="Run the autolang HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config()
    configure_logging(config)

    if args.command == "annotate":
        try:
            response = annotate_text(
                AnnotateRequest(text=_read_text_arg(args.text), explain=args.explain)
            )
            if args.format == "html":
                rendered = to_html(response, tag=args.tag, class_name=args.class_name)
            else:
                rendered = to_json(response)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

        if args.output:
            write_text(rendered, args.output)
            print(f"Wrote annotation {args.format.upper()} to {args.output}")
            return 0
        print(rendered)
        return 0

    if args.command == "classify":
        try:
            result = classify_tokens(ClassifyRequest(tokens=args.tokens, explain=args.explain))
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        for item in result.results:
            line = f"{item.token}\t{item.lang}"
            if item.explanation is not None:
                detail = item.explanation
                line += (
                    f"\taz={detail.score_az} en={detail.score_en}"
                    f" via={detail.resolution} rules={','.join(detail.rules) or '-'}"
                )
            print(line)
        return 0

    if args.command == "serve":
        try:
            import uvicorn
        except ModuleNotFoundError:
            print(
                "`autolang serve` requires uvicorn. Install project dependencies first.",
                file=sys.stderr,
            )
            return 1

        host = args.host or config.api_host
        port = args.port or config.api_port
        uvicorn.run(
            "autolang.api:app",
            host=host,
            port=port,
            workers=config.workers,
            log_level=config.log_level.lower(),
            reload=False,
        )
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


def _read_text_arg(value: str) -> str:
    if os.path.isfile(value):
        return Path(value).read_text(encoding="utf-8")
    return value


if __name__ == "__main__":
    raise SystemExit(main())
