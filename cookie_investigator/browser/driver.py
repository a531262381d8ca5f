"""
Browser driver capability used by the investigation pipeline.

The pipeline only talks to this protocol, so tests can replay fixed
requests, responses and cookies without launching a browser.
``session.BrowserSession`` is the Playwright-backed implementation.
"""

from __future__ import annotations

from typing import Protocol

from cookie_investigator import config
from cookie_investigator.browser import capture
from cookie_investigator.models import tracking_data


class BrowserDriver(Protocol):
    """Operations the pipeline needs from a browser."""

    @property
    def capture(self) -> capture.CaptureBuffer:
        """Buffer filled by request/response events."""
        ...

    async def launch(self, settings: config.InvestigatorSettings) -> None:
        """Start the browser, create a context and open a page."""
        ...

    async def navigate(self, url: str, wait_until: config.WaitUntil, timeout_ms: int) -> int | None:
        """Load *url*; returns the HTTP status or raises ``NavigationError``."""
        ...

    async def scroll_to_bottom(self) -> None:
        """Scroll the page to trigger lazy-loaded content."""
        ...

    async def wait(self, ms: int) -> None:
        """Sleep for *ms* milliseconds."""
        ...

    async def get_cookies(self) -> list[tracking_data.RawCookie]:
        """Read the context's current cookie jar."""
        ...

    async def close(self) -> None:
        """Tear down the browser; safe to call more than once."""
        ...
