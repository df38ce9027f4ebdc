"""Slack-style webhook notification for a finished capture.

Incoming webhooks only accept a JSON text payload, so the screenshot
itself is never uploaded; the message carries the capture time and, when
available, the vessel telemetry. Uploading the PNG would need a bot token
and the files API, which this job does not use.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, Optional

import requests

from ..clients.http_client import get_session
from ..config import (
    HTTP_TIMEOUT_SECONDS,
    REFERENCE_NAME,
    WEBHOOK_ICON,
    WEBHOOK_PLACEHOLDER,
    WEBHOOK_URL,
    WEBHOOK_USERNAME,
)
from ..models import ScreenshotArtifact, StepResult, TelemetrySnapshot
from ..utils.datetime_utils import iso_timestamp

logger = logging.getLogger(__name__)


def build_message(now: datetime, snapshot: Optional[TelemetrySnapshot] = None) -> str:
    """Return the notification text for a capture taken at *now*."""
    lines = [f"📸 Flotilla Canvas Screenshot - {iso_timestamp(now)}"]

    if snapshot is not None:
        vessel = snapshot.vessel
        position = snapshot.position
        lines += [
            "",
            f"🚢 *{vessel.name}* (MMSI: {vessel.mmsi})",
            f"📍 Position: {position.point.latitude:.6f}, {position.point.longitude:.6f}",
            f"📏 Distance to {REFERENCE_NAME}: *{snapshot.distance_to_reference_km:.2f} km*",
            f"⏰ Last Position: {position.observed_at_utc}",
            f"🚤 Speed: {position.speed_knots:.1f} knots",
        ]

    return "\n".join(lines)


def build_payload(text: str) -> Dict[str, Any]:
    return {"text": text, "username": WEBHOOK_USERNAME, "icon_emoji": WEBHOOK_ICON}


def webhook_configured(url: Optional[str]) -> bool:
    return bool(url) and url != WEBHOOK_PLACEHOLDER


def send_notification(
    artifact: ScreenshotArtifact,
    snapshot: Optional[TelemetrySnapshot] = None,
) -> StepResult[int]:
    """POST the summary for *artifact* to the webhook; never raises.

    Returns ``EMPTY`` when no webhook is configured and ``OK`` with the
    HTTP status on a 2xx response.
    """
    if not webhook_configured(WEBHOOK_URL):
        logger.error("Webhook URL is not configured; set the WEBHOOK environment variable")
        return StepResult.empty("webhook not configured")

    payload = build_payload(build_message(artifact.created_at, snapshot))

    try:
        response = get_session().post(WEBHOOK_URL, json=payload, timeout=HTTP_TIMEOUT_SECONDS)
    except requests.RequestException as exc:
        logger.error("Error sending notification: %s", exc)
        return StepResult.failed(f"request failed: {exc}")

    if not response.ok:
        logger.error("Failed to send notification: %s %s", response.status_code, response.reason)
        return StepResult.failed(f"webhook returned {response.status_code}")

    logger.info("Notification sent for %s", artifact.file_path.name)
    logger.info("Note: the image is not attached; webhooks accept text payloads only")
    return StepResult.ok(response.status_code)


async def send_notification_async(
    artifact: ScreenshotArtifact,
    snapshot: Optional[TelemetrySnapshot] = None,
) -> StepResult[int]:
    return await asyncio.to_thread(send_notification, artifact, snapshot)

__all__ = [
    "build_message",
    "build_payload",
    "webhook_configured",
    "send_notification",
    "send_notification_async",
]
