"""
Playwright-backed browser session for a single investigation.
Launches Chromium, records every request and response the page makes,
and exposes the context's cookie jar once the page has settled.

Use as an async context manager so the browser is always torn down,
even when navigation fails.
"""

from __future__ import annotations

import asyncio
from typing import Any

from playwright import async_api

from cookie_investigator import config
from cookie_investigator.browser import capture as capture_mod
from cookie_investigator.models import tracking_data
from cookie_investigator.utils import errors, logger

log = logger.create_logger("BrowserSession")

_SAME_SITE_VALUES = ("Strict", "Lax", "None")


def to_raw_cookie(cookie: dict[str, Any]) -> tracking_data.RawCookie:
    """Convert a Playwright cookie dict into a RawCookie.

    Playwright reports session cookies with ``expires == -1``;
    those become ``expires=None``.
    """
    expires = cookie.get("expires")
    same_site = cookie.get("sameSite")
    return tracking_data.RawCookie(
        name=cookie.get("name", ""),
        value=cookie.get("value", ""),
        domain=cookie.get("domain", ""),
        path=cookie.get("path", "/"),
        expires=expires if expires is not None and expires > 0 else None,
        http_only=cookie.get("httpOnly", False),
        secure=cookie.get("secure", False),
        same_site=same_site if same_site in _SAME_SITE_VALUES else None,
    )


class BrowserSession:
    """
    Manages the browser, context and page for one investigated URL.
    """

    def __init__(self) -> None:
        """Initialise a new browser session with an empty capture buffer."""
        self._playwright: async_api.Playwright | None = None
        self._browser: async_api.Browser | None = None
        self._context: async_api.BrowserContext | None = None
        self._page: async_api.Page | None = None
        self._capture = capture_mod.CaptureBuffer()

    @property
    def capture(self) -> capture_mod.CaptureBuffer:
        """Requests and responses captured so far."""
        return self._capture

    async def __aenter__(self) -> BrowserSession:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _require_page(self) -> async_api.Page:
        if not self._page:
            raise errors.DriverNotLaunchedError("No browser session active")
        return self._page

    # ==========================================================================
    # Browser Lifecycle
    # ==========================================================================

    async def launch(self, settings: config.InvestigatorSettings) -> None:
        """Launch Chromium, create an isolated context and open a page."""
        log.info("Launching browser", {"headless": settings.headless, "args": settings.browser_args})

        pw = await async_api.async_playwright().start()
        self._playwright = pw

        self._browser = await pw.chromium.launch(
            headless=settings.headless,
            args=settings.browser_args,
        )
        self._context = await self._browser.new_context(
            accept_downloads=settings.accept_downloads,
            user_agent=settings.user_agent,
        )
        self._page = await self._context.new_page()

        self._page.on("request", self._on_request)
        self._page.on("response", self._on_response)
        log.debug("Browser launched", {"userAgent": settings.user_agent})

    def _on_request(self, request: async_api.Request) -> None:
        """Record an outgoing request."""
        self._capture.record_request(
            tracking_data.CapturedRequest(
                url=request.url,
                method=request.method,
                headers=request.headers,
                resource_type=request.resource_type,
            )
        )

    def _on_response(self, response: async_api.Response) -> None:
        """Record an incoming response."""
        self._capture.record_response(
            tracking_data.CapturedResponse(
                url=response.url,
                status=response.status,
                headers=response.headers,
                # Playwright has no HTTP-cache flag; service worker hits are the
                # only responses it reports as served without the network.
                from_cache=response.from_service_worker,
            )
        )

    # ==========================================================================
    # Navigation
    # ==========================================================================

    async def navigate(self, url: str, wait_until: config.WaitUntil, timeout_ms: int) -> int | None:
        """Navigate the page to *url* and return the HTTP status, if any.

        Raises:
            NavigationError: If Playwright fails to load the page
                (timeout, DNS failure, crash).
        """
        page = self._require_page()
        log.debug("Navigating", {"url": url, "waitUntil": wait_until, "timeout": timeout_ms})
        try:
            response = await page.goto(url, wait_until=wait_until, timeout=timeout_ms)
        except async_api.Error as error:
            raise errors.NavigationError(url, error.message) from error

        status_code = response.status if response else None
        if page.url != url:
            log.info("Redirected", {"from": url, "to": page.url})
        return status_code

    async def scroll_to_bottom(self) -> None:
        """Scroll to the bottom of the page to trigger lazy-loaded trackers."""
        page = self._require_page()
        await page.evaluate("() => window.scrollTo(0, document.body.scrollHeight)")

    async def wait(self, ms: int) -> None:
        """Wait for a specified number of milliseconds.

        Uses ``asyncio.sleep`` instead of Playwright's
        ``page.wait_for_timeout``, which is meant for debugging.
        """
        await asyncio.sleep(ms / 1000)

    # ==========================================================================
    # Data Capture
    # ==========================================================================

    async def get_cookies(self) -> list[tracking_data.RawCookie]:
        """Read all cookies from the browser context."""
        if not self._context:
            raise errors.DriverNotLaunchedError("No browser session active")
        cookies = await self._context.cookies()
        log.debug("Captured raw cookies from browser", {"count": len(cookies)})
        return [to_raw_cookie(dict(cookie)) for cookie in cookies]

    # ==========================================================================
    # Cleanup
    # ==========================================================================

    async def close(self) -> None:
        """Close the browser and release Playwright."""
        log.debug("Closing browser session")
        if self._page:
            self._page.remove_listener("request", self._on_request)
            self._page.remove_listener("response", self._on_response)
            self._page = None

        if self._context:
            try:
                await self._context.close()
            except async_api.Error as exc:
                log.debug("Context close error (non-fatal)", {"error": str(exc)})
            self._context = None

        if self._browser:
            try:
                await self._browser.close()
            except async_api.Error as exc:
                log.debug("Browser close error (non-fatal)", {"error": str(exc)})
            self._browser = None

        if self._playwright:
            try:
                await self._playwright.stop()
            except async_api.Error as exc:
                log.debug("Playwright stop error (non-fatal)", {"error": str(exc)})
            self._playwright = None
