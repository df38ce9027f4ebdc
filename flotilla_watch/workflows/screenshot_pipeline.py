"""End-to-end telemetry, capture, notification and retention pipeline."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..models import ScreenshotArtifact, StepResult, TelemetrySnapshot
from ..services.capture import capture_screenshot
from ..services.notifier import send_notification_async
from ..services.retention import prune_screenshots
from ..services.telemetry import fetch_telemetry_async
from ..utils.datetime_utils import iso_timestamp

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PipelineReport:
    """What each step of one run produced."""

    telemetry: Optional[StepResult[TelemetrySnapshot]] = None
    screenshot: Optional[StepResult[ScreenshotArtifact]] = None
    notification: Optional[StepResult[int]] = None
    retention: Optional[StepResult[List]] = None
    error: str = ""

    @property
    def succeeded(self) -> bool:
        return self.screenshot is not None and self.screenshot.is_ok


async def run_once() -> PipelineReport:
    """Execute the full pipeline once; never raises."""
    logger.info("Starting screenshot process at %s", iso_timestamp())
    report = PipelineReport()

    try:
        # 1. Telemetry (optional context for the message)
        report.telemetry = await fetch_telemetry_async()
        snapshot = report.telemetry.value if report.telemetry.is_ok else None

        # 2. Screenshot, regardless of telemetry outcome
        report.screenshot = await capture_screenshot()

        if report.screenshot.is_ok:
            # 3. Notify, 4. prune
            report.notification = await send_notification_async(report.screenshot.value, snapshot)
            report.retention = await asyncio.to_thread(prune_screenshots)
        else:
            logger.error("Failed to take screenshot: %s", report.screenshot.reason)
    except Exception as exc:  # a run must never take the scheduler down
        logger.exception("Error in screenshot process")
        report.error = str(exc)

    logger.info("Screenshot process completed at %s", iso_timestamp())
    return report

__all__ = ["PipelineReport", "run_once"]
