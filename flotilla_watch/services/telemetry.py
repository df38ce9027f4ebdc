"""Vessel telemetry via the flotilla vessel API."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Any, Dict

import requests

from ..clients.http_client import get_session
from ..config import (
    API_BASE_URL,
    HTTP_TIMEOUT_SECONDS,
    MMSI,
    REFERENCE_LATITUDE,
    REFERENCE_LONGITUDE,
    REFERENCE_NAME,
)
from ..models import GeoPoint, StepResult, TelemetrySnapshot, Vessel
from ..utils.datetime_utils import utc_date
from ..utils.geo import haversine_km

logger = logging.getLogger(__name__)

REFERENCE_POINT = GeoPoint(REFERENCE_LATITUDE, REFERENCE_LONGITUDE)


def build_vessel_url(date: str, mmsi: str | None = None) -> str:
    """Return the API URL requesting *date*'s positions for *mmsi*."""
    mmsi = mmsi or MMSI
    return f"{API_BASE_URL}/api/vessel?start={date}&mmsis={mmsi}"


def parse_vessel_response(
    data: Dict[str, Any], mmsi: str | None = None
) -> StepResult[TelemetrySnapshot]:
    """Turn a decoded ``{days, start, vessels}`` body into a snapshot.

    A missing vessel or an empty ``positions`` list is ``EMPTY``, not an
    error. The API's position ordering is trusted as-is.
    """
    mmsi = mmsi or MMSI
    record = (data.get("vessels") or {}).get(mmsi)
    if not record or not record.get("positions"):
        logger.info("No vessel data or positions found for MMSI %s", mmsi)
        return StepResult.empty("no vessel data or positions found")

    vessel = Vessel.from_api(record, mmsi)
    current = vessel.positions[0]
    distance = haversine_km(current.point, REFERENCE_POINT)
    return StepResult.ok(TelemetrySnapshot(vessel=vessel, distance_to_reference_km=distance))


def fetch_telemetry(now: datetime | None = None, mmsi: str | None = None) -> StepResult[TelemetrySnapshot]:
    """Fetch today's telemetry for *mmsi*; never raises."""
    url = build_vessel_url(utc_date(now), mmsi)
    logger.info("Fetching vessel data: %s", url)

    try:
        response = get_session().get(url, timeout=HTTP_TIMEOUT_SECONDS)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"unexpected response body type {type(data).__name__}")
        result = parse_vessel_response(data, mmsi)
    except requests.RequestException as exc:
        logger.error("Error fetching vessel data: %s", exc)
        return StepResult.failed(f"request failed: {exc}")
    except (ValueError, KeyError, TypeError, AttributeError) as exc:
        logger.error("Error parsing vessel data: %s", exc)
        return StepResult.failed(f"invalid response: {exc}")

    if result.is_ok:
        snapshot = result.value
        logger.info(
            "Vessel %s is %.2f km from %s",
            snapshot.vessel.name,
            snapshot.distance_to_reference_km,
            REFERENCE_NAME,
        )
    return result


async def fetch_telemetry_async(now: datetime | None = None, mmsi: str | None = None) -> StepResult[TelemetrySnapshot]:
    """Run :func:`fetch_telemetry` off the event loop."""
    return await asyncio.to_thread(fetch_telemetry, now, mmsi)

__all__ = [
    "REFERENCE_POINT",
    "build_vessel_url",
    "parse_vessel_response",
    "fetch_telemetry",
    "fetch_telemetry_async",
]
