"""Top-level package for the flotilla-watch project.

This package simply exposes the public run() helper so callers can do
`python -m flotilla_watch` or `from flotilla_watch import run; run()`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("flotilla-watch")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .scheduler import Scheduler, run  # convenience re-export
from .workflows.screenshot_pipeline import run_once

__all__ = ["run", "run_once", "Scheduler", "__version__"]
