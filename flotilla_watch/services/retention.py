"""Bounded retention of screenshot files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ..config import (
    SCREENSHOT_DIR,
    SCREENSHOT_PREFIX,
    SCREENSHOT_RETENTION,
    SCREENSHOT_SUFFIX,
)
from ..models import StepResult

logger = logging.getLogger(__name__)


def list_screenshots(directory: Path) -> List[Path]:
    """Return matching screenshots, newest first.

    Names embed a sortable UTC timestamp, so name order is creation order.
    """
    files = [
        path
        for path in directory.iterdir()
        if path.is_file()
        and path.name.startswith(SCREENSHOT_PREFIX)
        and path.name.endswith(SCREENSHOT_SUFFIX)
    ]
    return sorted(files, key=lambda p: p.name, reverse=True)


def prune_screenshots(
    directory: Path | None = None,
    keep: int = SCREENSHOT_RETENTION,
) -> StepResult[List[Path]]:
    """Delete all but the *keep* most recent screenshots in *directory*."""
    directory = directory or SCREENSHOT_DIR
    try:
        screenshots = list_screenshots(directory)
    except OSError as exc:
        logger.error("Error listing screenshots in %s: %s", directory, exc)
        return StepResult.failed(str(exc))

    deleted: List[Path] = []
    for path in screenshots[keep:]:
        try:
            path.unlink()
        except OSError as exc:
            logger.error("Could not delete old screenshot %s: %s", path.name, exc)
            continue
        deleted.append(path)
        logger.info("Deleted old screenshot: %s", path.name)

    return StepResult.ok(deleted)

__all__ = ["list_screenshots", "prune_screenshots"]
