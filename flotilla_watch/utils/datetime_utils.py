"""Date and timestamp helpers, always in UTC."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_date(now: datetime | None = None) -> str:
    """Return the UTC date as ``YYYY-MM-DD``."""
    return (now or utc_now()).astimezone(timezone.utc).strftime("%Y-%m-%d")


def iso_timestamp(now: datetime | None = None) -> str:
    """Return an ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    moment = (now or utc_now()).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def filename_stamp(now: datetime | None = None) -> str:
    """Sortable timestamp safe for filenames, e.g. ``2025-06-01T12-00-00-123Z``."""
    return iso_timestamp(now).replace(":", "-").replace(".", "-")

__all__ = ["utc_now", "utc_date", "iso_timestamp", "filename_stamp"]
