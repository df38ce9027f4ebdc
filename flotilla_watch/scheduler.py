"""Periodic execution of the screenshot pipeline.

A :class:`Scheduler` owns exactly one timer task that wakes on UTC hour
boundaries (every six hours by default, i.e. ``0 */6 * * *``) and starts a
pipeline run each time it fires. Runs are not serialised: an immediate
startup run and a scheduled run that fires while it is still in flight
will overlap.
"""

from __future__ import annotations

import asyncio
import logging
import os
import signal
from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable, Optional, Set

from .config import SCHEDULE_EVERY_HOURS, SCHEDULE_NAME
from .utils.datetime_utils import utc_now
from .workflows.screenshot_pipeline import run_once

logger = logging.getLogger(__name__)

Job = Callable[[], Awaitable[object]]


def next_run_after(now: datetime, every_hours: int = SCHEDULE_EVERY_HOURS) -> datetime:
    """Return the first UTC hour boundary divisible by *every_hours* strictly after *now*."""
    if not 0 < every_hours <= 24 or 24 % every_hours:
        raise ValueError(f"every_hours must divide 24, got {every_hours}")

    moment = now.astimezone(timezone.utc)
    midnight = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    slot = (moment.hour // every_hours + 1) * every_hours
    return midnight + timedelta(hours=slot)


class Scheduler:
    """Fire *job* on a fixed UTC cadence until stopped."""

    def __init__(
        self,
        job: Job = run_once,
        every_hours: int = SCHEDULE_EVERY_HOURS,
        name: str = SCHEDULE_NAME,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.job = job
        self.every_hours = every_hours
        self.name = name
        self._clock = clock
        self._timer: Optional[asyncio.Task] = None
        self._runs: Set[asyncio.Task] = set()
        self._next_run: Optional[datetime] = None

    @property
    def running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    @property
    def next_run(self) -> Optional[datetime]:
        return self._next_run

    def start(self, run_immediately: bool = True) -> None:
        """Start the timer; must be called from inside a running event loop."""
        if self.running:
            raise RuntimeError(f"scheduler {self.name!r} already started")

        logger.info("Initializing %s to run every %d hours...", self.name, self.every_hours)
        self._next_run = next_run_after(self._clock(), self.every_hours)
        self._timer = asyncio.create_task(self._tick(), name=self.name)
        logger.info("%s initialized. Next run: %s", self.name, self._next_run.isoformat())

        if run_immediately:
            logger.info("Running initial screenshot...")
            self.trigger()

    def stop(self) -> None:
        """Cancel the timer; in-flight runs are not awaited."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._next_run = None

    def trigger(self) -> asyncio.Task:
        """Start one run now, outside the schedule."""
        task = asyncio.create_task(self.job())
        self._runs.add(task)
        task.add_done_callback(self._runs.discard)
        return task

    async def _tick(self) -> None:
        while True:
            # asyncio.sleep is monotonic; re-check the wall clock until the slot is reached
            remaining = (self._next_run - self._clock()).total_seconds()
            while remaining > 0:
                await asyncio.sleep(remaining)
                remaining = (self._next_run - self._clock()).total_seconds()

            logger.info("Scheduled run of %s firing", self.name)
            self.trigger()
            self._next_run = next_run_after(max(self._clock(), self._next_run), self.every_hours)


def _exit_now(status: int) -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()
    os._exit(status)


async def run_forever(
    scheduler: Optional[Scheduler] = None,
    exit_process: Callable[[int], object] = _exit_now,
) -> int:
    """Run *scheduler* until SIGINT or SIGTERM, then exit the process with status 0.

    In-flight runs are not awaited: the signal handler ends the process
    directly, so a hung request or browser step cannot delay shutdown.
    """
    scheduler = scheduler or Scheduler()
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()

    def _shutdown(sig: signal.Signals) -> None:
        logger.info("Received %s, shutting down...", sig.name)
        scheduler.stop()
        stop.set()
        exit_process(0)

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, _shutdown, sig)

    scheduler.start()
    try:
        await stop.wait()
    finally:
        scheduler.stop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.remove_signal_handler(sig)
    return 0


def run() -> int:
    """Blocking entry point used by the CLI."""
    return asyncio.run(run_forever())

__all__ = ["Scheduler", "next_run_after", "run_forever", "run"]
