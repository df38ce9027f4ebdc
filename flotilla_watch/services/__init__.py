"""Service layer modules grouping the pipeline steps by concern.

This module provides convenience re-exports so that callers can simply do for
example `from flotilla_watch.services import fetch_telemetry` without having to
know which underlying module provides the symbol.
"""

from .telemetry import fetch_telemetry, fetch_telemetry_async  # noqa: F401
from .capture import capture_screenshot  # noqa: F401
from .notifier import send_notification, send_notification_async  # noqa: F401
from .retention import prune_screenshots  # noqa: F401

__all__ = [
    "fetch_telemetry",
    "fetch_telemetry_async",
    "capture_screenshot",
    "send_notification",
    "send_notification_async",
    "prune_screenshots",
]
