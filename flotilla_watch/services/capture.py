"""Headless capture of the flotilla map canvas."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from playwright.async_api import Error as PlaywrightError

from ..clients.browser import launch_browser
from ..config import (
    CANVAS_SELECTOR,
    ELEMENT_TIMEOUT_MS,
    SCREENSHOT_DIR,
    SCREENSHOT_PREFIX,
    SCREENSHOT_SUFFIX,
    SETTLE_DELAY_SECONDS,
    TARGET_URL,
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
)
from ..models import ScreenshotArtifact, StepResult
from ..utils.datetime_utils import filename_stamp, utc_now

logger = logging.getLogger(__name__)


def screenshot_path(now: datetime, directory: Path) -> Path:
    """Return the artifact path for a capture taken at *now*."""
    return directory / f"{SCREENSHOT_PREFIX}{filename_stamp(now)}{SCREENSHOT_SUFFIX}"


async def capture_screenshot(
    url: str | None = None,
    directory: Path | None = None,
) -> StepResult[ScreenshotArtifact]:
    """Screenshot the first canvas on *url* into *directory*.

    Any launch, navigation, wait or I/O failure is logged and returned as
    ``FAILED``; the browser is closed before this returns.
    """
    url = url or TARGET_URL
    directory = directory or SCREENSHOT_DIR

    try:
        directory.mkdir(parents=True, exist_ok=True)

        async with launch_browser() as browser:
            page = await browser.new_page(
                viewport={"width": VIEWPORT_WIDTH, "height": VIEWPORT_HEIGHT}
            )

            logger.info("Navigating to %s", url)
            await page.goto(url, wait_until="networkidle")

            logger.info("Waiting for %s element...", CANVAS_SELECTOR)
            await page.wait_for_selector(CANVAS_SELECTOR, timeout=ELEMENT_TIMEOUT_MS)

            # the canvas draws asynchronously and exposes no ready signal
            await page.wait_for_timeout(SETTLE_DELAY_SECONDS * 1000)

            now = utc_now()
            path = screenshot_path(now, directory)
            await page.locator(CANVAS_SELECTOR).first.screenshot(path=str(path))
    except (PlaywrightError, OSError) as exc:
        logger.error("Error taking screenshot: %s", exc)
        return StepResult.failed(str(exc))

    logger.info("Screenshot saved: %s", path)
    return StepResult.ok(ScreenshotArtifact(file_path=path, created_at=now))

__all__ = ["capture_screenshot", "screenshot_path"]
