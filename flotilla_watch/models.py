"""Domain models used across the project."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(slots=True, frozen=True)
class VesselPosition:
    """One telemetry sample as reported by the vessel API."""

    point: GeoPoint
    speed_knots: float
    observed_at_epoch: int
    observed_at_utc: str

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "VesselPosition":
        return cls(
            point=GeoPoint(float(raw["lat"]), float(raw["lon"])),
            speed_knots=float(raw["speed"]),
            observed_at_epoch=int(raw["last_position_epoch"]),
            observed_at_utc=str(raw["last_position_UTC"]),
        )


def _parse_positions(raw_positions: List[Dict[str, Any]]) -> List[VesselPosition]:
    positions: List[VesselPosition] = []
    for index, raw in enumerate(raw_positions):
        try:
            positions.append(VesselPosition.from_api(raw))
        except (KeyError, TypeError, ValueError) as exc:
            if index == 0:
                raise
            logger.debug("Skipping malformed position %d: %s", index, exc)
    return positions


@dataclass(slots=True)
class Vessel:
    """A tracked vessel and the positions returned for the query date.

    Identity is the MMSI; only ``positions[0]`` is ever consumed.
    """

    id: str
    name: str
    mmsi: str
    positions: List[VesselPosition] = field(default_factory=list)
    imo: Optional[str] = None
    eni: Optional[str] = None
    country_iso: Optional[str] = None
    type: Optional[str] = None
    type_specific: Optional[str] = None

    @classmethod
    def from_api(cls, raw: Dict[str, Any], mmsi: Optional[str] = None) -> "Vessel":
        """Build a vessel from an API record keyed by *mmsi*.

        The first position must parse; later samples that do not are dropped.
        """
        return cls(
            id=str(raw.get("uuid") or ""),
            name=str(raw.get("name") or ""),
            mmsi=str(raw.get("mmsi") or mmsi or ""),
            positions=_parse_positions(raw.get("positions") or []),
            imo=raw.get("imo"),
            eni=raw.get("eni"),
            country_iso=raw.get("country_iso"),
            type=raw.get("type"),
            type_specific=raw.get("type_specific"),
        )

    @property
    def current_position(self) -> Optional[VesselPosition]:
        return self.positions[0] if self.positions else None


@dataclass(slots=True)
class TelemetrySnapshot:
    """Vessel telemetry plus the derived distance, built once per run."""

    vessel: Vessel
    distance_to_reference_km: float

    @property
    def position(self) -> VesselPosition:
        return self.vessel.positions[0]


@dataclass(slots=True, frozen=True)
class ScreenshotArtifact:
    """A PNG written by the page capturer."""

    file_path: Path
    created_at: datetime


class StepStatus(Enum):
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class StepResult(Generic[T]):
    """Outcome of one pipeline step.

    ``OK`` carries a value, ``EMPTY`` means the step succeeded but had
    nothing to return, ``FAILED`` carries the reason.
    """

    status: StepStatus
    value: Optional[T] = None
    reason: str = ""

    @classmethod
    def ok(cls, value: T) -> "StepResult[T]":
        return cls(StepStatus.OK, value=value)

    @classmethod
    def empty(cls, reason: str = "") -> "StepResult[T]":
        return cls(StepStatus.EMPTY, reason=reason)

    @classmethod
    def failed(cls, reason: str) -> "StepResult[T]":
        return cls(StepStatus.FAILED, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.status is StepStatus.OK

    @property
    def is_failed(self) -> bool:
        return self.status is StepStatus.FAILED


__all__ = [
    "GeoPoint",
    "VesselPosition",
    "Vessel",
    "TelemetrySnapshot",
    "ScreenshotArtifact",
    "StepStatus",
    "StepResult",
]
