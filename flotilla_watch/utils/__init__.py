"""Utility functions for the flotilla_watch project.

Re-exports the geo and datetime helpers so that imports like
`from ..utils import haversine_km` work as expected.
"""

from .geo import haversine_km  # noqa: F401
from .datetime_utils import filename_stamp, iso_timestamp, utc_date, utc_now  # noqa: F401

__all__ = [
    "haversine_km",
    "filename_stamp",
    "iso_timestamp",
    "utc_date",
    "utc_now",
]
