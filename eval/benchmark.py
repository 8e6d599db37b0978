#!/usr/bin/env python3
"""Run the token classifier over a labeled manifest and write artifacts.

Manifest format (JSONL), one case per line, either a single token:
{"id": "tok-001", "token": "salam", "language": "az"}

or a sentence with one label per non-whitespace token:
{"id": "sent-001", "text": "Salam, how are you?", "languages": ["az", "en", "en", "en"]}
"""

from __future__ import annotations

import argparse
import csv
import json
import subprocess
import sys
import time
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from autolang.core import is_whitespace, score_token, tokenize
from autolang.eval import LabeledToken, summarize_predictions
from autolang.languages import resolve_language_profile


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run autolang classifier benchmark.")
    parser.add_argument("--manifest", required=True, help="Path to benchmark JSONL manifest")
    parser.add_argument("--output-root", default="eval/runs", help="Artifact root directory")
    return parser.parse_args()


def load_manifest(path: Path) -> list[tuple[str, LabeledToken]]:
    cases: list[tuple[str, LabeledToken]] = []
    for line_num, raw_line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        payload = json.loads(line)
        case_id = str(payload.get("id") or f"line-{line_num}")

        if "token" in payload:
            label = _language(payload["language"])
            cases.append((case_id, LabeledToken(str(payload["token"]), label)))
            continue

        words = [piece for piece in tokenize(str(payload["text"])) if not is_whitespace(piece)]
        labels = [_language(label) for label in payload["languages"]]
        if len(words) != len(labels):
            raise ValueError(
                f"{case_id}: {len(words)} tokens but {len(labels)} language labels"
            )
        for word, label in zip(words, labels):
            cases.append((case_id, LabeledToken(word, label)))
    return cases


def _language(label: str) -> str:
    return resolve_language_profile(str(label)).code


def run_benchmark(cases: list[tuple[str, LabeledToken]]) -> dict[str, Any]:
    rows: list[dict[str, Any]] = []
    predicted = []
    started = time.perf_counter()

    for case_id, case in cases:
        score = score_token(case.token)
        predicted.append(score.language)
        rows.append(
            {
                "case_id": case_id,
                "token": case.token,
                "reference": case.language,
                "predicted": score.language,
                "correct": score.language == case.language,
                "score_az": score.score_az,
                "score_en": score.score_en,
                "resolution": score.resolution,
                "rules": " ".join(score.rules),
            }
        )

    elapsed = time.perf_counter() - started
    summary = summarize_predictions(predicted, [case.language for _, case in cases])
    summary["total_runtime_sec"] = round(elapsed, 6)
    return {"summary": summary, "rows": rows}


def write_artifacts(output_root: Path, *, manifest: Path, result: dict[str, Any]) -> Path:
    timestamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%SZ")
    git_sha = _git_sha()
    out_dir = output_root / f"{timestamp}_{git_sha[:8]}"
    out_dir.mkdir(parents=True, exist_ok=True)

    summary_payload = {
        "generated_at": datetime.now(UTC).isoformat(),
        "git_sha": git_sha,
        "manifest_path": str(manifest),
        "command": " ".join([sys.executable, *sys.argv]),
        "summary": result["summary"],
    }
    (out_dir / "summary.json").write_text(
        json.dumps(summary_payload, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )

    with (out_dir / "predictions.csv").open("w", encoding="utf-8", newline="") as handle:
        if result["rows"]:
            writer = csv.DictWriter(handle, fieldnames=list(result["rows"][0].keys()))
            writer.writeheader()
            writer.writerows(result["rows"])
    return out_dir


def _git_sha() -> str:
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            check=True,
            text=True,
            capture_output=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return proc.stdout.strip()


def main() -> int:
    args = parse_args()
    manifest = Path(args.manifest)
    result = run_benchmark(load_manifest(manifest))
    out_dir = write_artifacts(Path(args.output_root), manifest=manifest, result=result)
    print(json.dumps(result["summary"], indent=2))
    print(f"Artifacts written to: {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
