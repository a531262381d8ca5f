"""
Strategies for deciding when a page has finished producing traffic.

Request and response events keep arriving after navigation reports
the page as loaded, so the pipeline waits before snapshotting
cookies and treating the capture buffer as final.

- ``FixedDelaySettle`` sleeps for a fixed duration.
- ``NetworkQuietSettle`` polls the capture buffer and returns once no
  new request has arrived for a quiet window, or the maximum wait
  has elapsed.
"""

from __future__ import annotations

import time
from typing import Protocol

from cookie_investigator import config
from cookie_investigator.browser import driver as driver_mod
from cookie_investigator.utils import logger

log = logger.create_logger("Settle")

_POLL_INTERVAL_MS = 250


class SettleStrategy(Protocol):
    """Waits until captured data can be treated as final."""

    async def settle(self, driver: driver_mod.BrowserDriver, max_ms: int) -> None:
        """Wait for the page behind *driver*, for at most *max_ms*."""
        ...


class FixedDelaySettle:
    """Wait for the full duration regardless of page activity."""

    async def settle(self, driver: driver_mod.BrowserDriver, max_ms: int) -> None:
        log.debug("Waiting fixed settle delay", {"ms": max_ms})
        await driver.wait(max_ms)


class NetworkQuietSettle:
    """Return once no request has been captured for *quiet_window_ms*."""

    def __init__(self, quiet_window_ms: int, poll_interval_ms: int = _POLL_INTERVAL_MS) -> None:
        self.quiet_window_ms = quiet_window_ms
        self.poll_interval_ms = poll_interval_ms

    async def settle(self, driver: driver_mod.BrowserDriver, max_ms: int) -> None:
        waited = 0
        quiet_for = 0
        last_count = driver.capture.request_count
        started = time.monotonic()

        while waited < max_ms:
            step = min(self.poll_interval_ms, max_ms - waited)
            await driver.wait(step)
            waited += step

            count = driver.capture.request_count
            if count == last_count:
                quiet_for += step
            else:
                quiet_for = 0
                last_count = count

            if quiet_for >= self.quiet_window_ms:
                log.debug(
                    "Network quiet",
                    {"waitedMs": waited, "requests": count, "elapsedMs": int((time.monotonic() - started) * 1000)},
                )
                return

        log.debug("Settle wait exhausted before network went quiet", {"maxMs": max_ms})


def create_settle_strategy(settings: config.InvestigatorSettings) -> SettleStrategy:
    """Build the strategy named by ``settings.settle_strategy``."""
    if settings.settle_strategy == "network-quiet":
        return NetworkQuietSettle(settings.quiet_window_ms)
    return FixedDelaySettle()
