"""Convenience re-exports for shared client accessors."""

from .http_client import get_session  # noqa: F401
from .browser import launch_browser  # noqa: F401

__all__ = [
    "get_session",
    "launch_browser",
]
