"""Offline chunk analysis of a save dumped to JSON.

Usage:
- python -m brick_chunks analyze save.json [--top 10] [--json]
- python -m brick_chunks in X Y [Z]
- python -m brick_chunks count save.json X Y [Z]
- python -m brick_chunks plan save.json [--out markers.json]
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import re
import sys
from pathlib import Path
from typing import List, Optional

from .analyzer import AnalysisResult, analyze
from .commands import report_lines
from .errors import ChunksError
from .geometry import chunk_of, format_chunk
from .markers import classify, plan_all
from .saves import load_save
from .settings import Settings

LOG = logging.getLogger("brick_chunks")
MARKUP_RE = re.compile(r'</?(?:[a-z]+(?:="[^"]*")?)?>')


def _plain(text: str) -> str:
    return MARKUP_RE.sub("", text)


def _result_to_dict(result: AnalysisResult) -> dict[str, object]:
    return {
        "total_bricks": result.total_bricks,
        "total_colliders": result.total_colliders,
        "total_components": result.total_components,
        "elapsed": round(result.elapsed, 3),
        "unknown_assets": dict(result.unknown_assets),
        "chunks": [
            {
                "chunk": list(chunk),
                "bricks": stats.brick_count,
                "colliders": stats.collider_count,
                "components": stats.component_count,
                "severity": classify(stats).value,
            }
            for chunk, stats in sorted(result.chunks.items())
        ],
    }


def _cmd_analyze(args: argparse.Namespace, settings: Settings) -> int:
    result = analyze(load_save(Path(args.save)))
    if args.json:
        print(json.dumps(_result_to_dict(result), indent=2))
        return 0
    limit = settings.report_limit if args.top is None else args.top
    for line in report_lines(result, limit):
        print(_plain(line))
    return 0


def _cmd_in(args: argparse.Namespace, settings: Settings) -> int:
    print(format_chunk(chunk_of((args.x, args.y, args.z))))
    return 0


def _cmd_count(args: argparse.Namespace, settings: Settings) -> int:
    result = analyze(load_save(Path(args.save)))
    chunk = chunk_of((args.x, args.y, args.z))
    stats = result.stats_for(chunk)
    print(
        f"chunk={format_chunk(chunk)} bricks={stats.brick_count} "
        f"colliders={stats.collider_count} components={stats.component_count} "
        f"severity={classify(stats).value}"
    )
    return 0


def _cmd_plan(args: argparse.Namespace, settings: Settings) -> int:
    result = analyze(load_save(Path(args.save)))
    plans = [plan.to_dict() for plan in plan_all(result, settings)]
    text = json.dumps({"plans": plans}, indent=2)
    if args.out:
        Path(args.out).write_text(text + "\n", encoding="utf-8")
        LOG.info("Wrote %d chunk marker plan(s) to %s", len(plans), args.out)
    else:
        print(text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="brick-chunks",
        description="Find chunks whose collider count exceeds the physics limit.",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("analyze", help="Analyze a save dump and print a report")
    p.add_argument("save", help="Save dump (JSON)")
    p.add_argument("--top", type=int, default=None, help="Number of chunks to list (default: BRICK_CHUNKS_REPORT_LIMIT or 5)")
    p.add_argument("--json", action="store_true", help="Print every chunk as JSON")
    p.set_defaults(func=_cmd_analyze)

    p = sub.add_parser("in", help="Print the chunk containing a position")
    p.add_argument("x", type=float)
    p.add_argument("y", type=float)
    p.add_argument("z", type=float, nargs="?", default=0.0)
    p.set_defaults(func=_cmd_in)

    p = sub.add_parser("count", help="Print the stats of the chunk containing a position")
    p.add_argument("save", help="Save dump (JSON)")
    p.add_argument("x", type=float)
    p.add_argument("y", type=float)
    p.add_argument("z", type=float, nargs="?", default=0.0)
    p.set_defaults(func=_cmd_count)

    p = sub.add_parser("plan", help="Write the marker plan for every non-empty chunk")
    p.add_argument("save", help="Save dump (JSON)")
    p.add_argument("--out", default=None, help="Output file (default: stdout)")
    p.set_defaults(func=_cmd_plan)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=os.getenv("BRICK_CHUNKS_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()

    save = getattr(args, "save", None)
    if save is not None and not Path(save).exists():
        print(f"Missing save file: {save}", file=sys.stderr)
        return 2

    try:
        return args.func(args, settings)
    except ChunksError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
