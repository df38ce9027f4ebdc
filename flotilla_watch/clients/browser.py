"""Scoped acquisition of a headless Chromium instance."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import Browser, async_playwright

from ..config import BROWSER_ARGS

logger = logging.getLogger(__name__)


@asynccontextmanager
async def launch_browser() -> AsyncIterator[Browser]:
    """Yield a headless Chromium browser; it is closed on every exit path."""
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=True, args=BROWSER_ARGS)
        logger.debug("Launched headless Chromium")
        try:
            yield browser
        finally:
            await browser.close()
            logger.debug("Closed headless Chromium")

__all__ = ["launch_browser"]
