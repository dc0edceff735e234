"""Periodic liveness heartbeat, scheduled independently of request handling."""
from __future__ import annotations

import asyncio
import gc
import logging
from datetime import datetime, timezone
from typing import Optional

LOGGER = logging.getLogger(__name__)


class Heartbeat:
    """Log a heartbeat every ``interval_seconds`` and optionally hint the GC."""

    def __init__(self, interval_seconds: float, *, collect_garbage: bool = False) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.interval_seconds = interval_seconds
        self.collect_garbage = collect_garbage
        self._task: Optional[asyncio.Task[None]] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def beat(self) -> Optional[int]:
        """Emit one heartbeat; returns the number of collected objects when GC ran."""

        timestamp = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        LOGGER.info("heartbeat @ %s", timestamp, extra={"event": "heartbeat"})
        if not self.collect_garbage:
            return None
        collected = gc.collect()
        LOGGER.debug("gc collected %s objects", collected)
        return collected

    async def run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                self.beat()
            except Exception:
                LOGGER.exception("Heartbeat failed")

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self.run(), name="heartbeat")
        LOGGER.info("Heartbeat scheduled every %ss", self.interval_seconds)

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
