"""Fixed-rate, non-overlapping poll loop."""

import threading
import time
from collections.abc import Callable

from loguru import logger


class PollScheduler:
    """
    Runs a task at a fixed rate on the calling thread.

    The first run starts immediately. Runs never overlap: when a run takes
    longer than the interval, the missed slots are skipped rather than
    replayed.
    """

    def __init__(
        self,
        task: Callable[[], None],
        interval_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.task = task
        self.interval = interval_seconds
        self.clock = clock
        self.runs = 0
        self.skipped = 0
        self._stop = threading.Event()

    def run(self, max_runs: int | None = None) -> None:
        """Block until stop() is called (or max_runs runs have completed)."""
        logger.info(f"Monitoring started. Checking for submissions every {self.interval:g} seconds...")
        next_run = self.clock()

        while not self._stop.is_set():
            self._run_once()
            if max_runs is not None and self.runs >= max_runs:
                break

            next_run += self.interval
            now = self.clock()
            if now > next_run:
                missed = int((now - next_run) // self.interval) + 1
                self.skipped += missed
                next_run += missed * self.interval
                logger.debug(f"Poll overran the interval, skipping {missed} slot(s)")

            self._stop.wait(max(0.0, next_run - now))

    def _run_once(self) -> None:
        try:
            self.task()
        except Exception:
            logger.opt(exception=True).error("Error during submission monitoring")
        finally:
            self.runs += 1

    def stop(self) -> None:
        """Ask the loop to exit after the current run; safe from signal handlers."""
        self._stop.set()

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()
