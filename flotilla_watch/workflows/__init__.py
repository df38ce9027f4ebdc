"""End-to-end workflows."""

from .screenshot_pipeline import PipelineReport, run_once  # noqa: F401

__all__ = ["PipelineReport", "run_once"]
