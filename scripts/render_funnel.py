#!/usr/bin/env python3
"""Render the certainty navigator page (or just the funnel SVG) to a file.

Usage locally:
    python -m scripts.render_funnel                            # page at 70%
    python -m scripts.render_funnel --threshold 85 --format svg --output funnel.svg
    python -m scripts.render_funnel --manifest data/manifest.json --seed 7

Exit code is 1 when the manifest fails to load; the error page is still
written so the failure is visible.
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Ensure the project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from ledger.config import Settings
from ledger.container import AppContainer
from ledger.logging_config import get_logger, setup_logging

VALID_FORMATS = ("html", "svg")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render the certainty navigator.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Slider position as a whole percent 0-100 (default: from settings)",
    )
    parser.add_argument(
        "--format",
        choices=VALID_FORMATS,
        default="html",
        help="Full page or the funnel SVG only (default: html)",
    )
    parser.add_argument("--manifest", default=None, help="Manifest path or http(s) URL")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the marker jitter")
    parser.add_argument("--output", default="-", help="Output file (default: stdout)")
    args = parser.parse_args(argv)
    if args.threshold is not None and not 0 <= args.threshold <= 100:
        parser.error("--threshold must be between 0 and 100")
    return args


def build_settings(args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.manifest:
        if args.manifest.startswith(("http://", "https://")):
            overrides["manifest_url"] = args.manifest
        else:
            overrides["manifest_path"] = args.manifest
    if args.seed is not None:
        overrides["jitter_seed"] = args.seed
    return Settings(**overrides)


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = build_settings(args)
    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    logger = get_logger("render_funnel")

    container = AppContainer()
    container.settings.override(settings)
    navigator = container.navigator()

    ok = asyncio.run(navigator.load())
    if args.threshold is not None:
        navigator.set_threshold_percent(args.threshold)

    if args.format == "svg":
        if not ok:
            logger.error("render_aborted", reason=navigator.error)
            return 1
        output = navigator.funnel_svg()
    else:
        output = navigator.page_html()

    if args.output == "-":
        sys.stdout.write(output + "\n")
    else:
        Path(args.output).write_text(output, encoding="utf-8")
        logger.info(
            "render_written",
            path=args.output,
            format=args.format,
            visible=navigator.visible_count,
            total=navigator.total_count,
        )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
