"""Centralised configuration for flotilla_watch.

Environment variables are loaded once and all related constants are
grouped by concern for easier maintenance.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


# ---------------------------------------------------------------------------
# Core credentials (from environment)
# ---------------------------------------------------------------------------
WEBHOOK_URL: str | None = os.getenv("WEBHOOK")
WEBHOOK_PLACEHOLDER: str = "YOUR_SLACK_WEBHOOK_URL_HERE"

# ---------------------------------------------------------------------------
# Tracked vessel and reference location
# ---------------------------------------------------------------------------
MMSI: str = os.getenv("FLOTILLA_MMSI", "232057367")
API_BASE_URL: str = os.getenv("FLOTILLA_API_BASE_URL", "https://flotilla-orpin.vercel.app").rstrip("/")
HTTP_TIMEOUT_SECONDS: float | None = _optional_float("HTTP_TIMEOUT_SECONDS")

# Gaza Strip, approximate centre
REFERENCE_NAME: str = "Gaza Strip"
REFERENCE_LATITUDE: float = 31.5
REFERENCE_LONGITUDE: float = 34.45

# ---------------------------------------------------------------------------
# Page capture
# ---------------------------------------------------------------------------
TARGET_URL: str = os.getenv("FLOTILLA_URL", "https://flotilla-orpin.vercel.app/")
VIEWPORT_WIDTH: int = 1920
VIEWPORT_HEIGHT: int = 1080
CANVAS_SELECTOR: str = "canvas"
ELEMENT_TIMEOUT_MS: int = 30_000
SETTLE_DELAY_SECONDS: float = 5.0
BROWSER_ARGS: list[str] = ["--no-sandbox", "--disable-setuid-sandbox"]

# ---------------------------------------------------------------------------
# Screenshot storage and retention
# ---------------------------------------------------------------------------
SCREENSHOT_DIR: Path = Path(os.getenv("SCREENSHOT_DIR", "./screenshots"))
SCREENSHOT_PREFIX: str = "flotilla-canvas-"
SCREENSHOT_SUFFIX: str = ".png"
SCREENSHOT_RETENTION: int = 10

# ---------------------------------------------------------------------------
# Notification
# ---------------------------------------------------------------------------
WEBHOOK_USERNAME: str = "Flotilla Bot"
WEBHOOK_ICON: str = ":ship:"

# ---------------------------------------------------------------------------
# Scheduling and logging
# ---------------------------------------------------------------------------
SCHEDULE_NAME: str = "flotilla-screenshot"
SCHEDULE_EVERY_HOURS: int = 6
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # credentials
    "WEBHOOK_URL",
    "WEBHOOK_PLACEHOLDER",
    # vessel / reference
    "MMSI",
    "API_BASE_URL",
    "HTTP_TIMEOUT_SECONDS",
    "REFERENCE_NAME",
    "REFERENCE_LATITUDE",
    "REFERENCE_LONGITUDE",
    # capture
    "TARGET_URL",
    "VIEWPORT_WIDTH",
    "VIEWPORT_HEIGHT",
    "CANVAS_SELECTOR",
    "ELEMENT_TIMEOUT_MS",
    "SETTLE_DELAY_SECONDS",
    "BROWSER_ARGS",
    # storage
    "SCREENSHOT_DIR",
    "SCREENSHOT_PREFIX",
    "SCREENSHOT_SUFFIX",
    "SCREENSHOT_RETENTION",
    # notification
    "WEBHOOK_USERNAME",
    "WEBHOOK_ICON",
    # misc
    "SCHEDULE_NAME",
    "SCHEDULE_EVERY_HOURS",
    "LOG_LEVEL",
]
