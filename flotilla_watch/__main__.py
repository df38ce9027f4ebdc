"""Command-line entry point: ``python -m flotilla_watch``."""

from __future__ import annotations

import argparse
import asyncio
import sys

from .logging_config import logging as _  # noqa: F401  # ensure config applied early
from .scheduler import run
from .workflows.screenshot_pipeline import run_once


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="flotilla-watch",
        description="Capture the flotilla map every six hours and post a vessel summary.",
    )
    ap.add_argument("--once", action="store_true", help="Run the pipeline once and exit")
    args = ap.parse_args(argv)

    if args.once:
        report = asyncio.run(run_once())
        return 0 if report.succeeded else 1
    return run()


if __name__ == "__main__":
    sys.exit(main())
