"""Shared fixtures for the test suite."""

from __future__ import annotations

import pathlib

import pytest

from cookie_investigator import config
from cookie_investigator.browser import capture
from cookie_investigator.models import tracking_data

# ── Capture Factories ───────────────────────────────────────────


def make_cookie(
    name: str = "theme",
    value: str = "dark",
    domain: str = "example.com",
    *,
    expires: float | None = None,
    same_site: tracking_data.SameSite | None = "Lax",
) -> tracking_data.RawCookie:
    return tracking_data.RawCookie(
        name=name,
        value=value,
        domain=domain,
        path="/",
        expires=expires,
        http_only=False,
        secure=True,
        same_site=same_site,
    )


def make_request(
    url: str = "https://example.com/api/data",
    *,
    method: str = "GET",
    resource_type: str = "xhr",
) -> tracking_data.CapturedRequest:
    return tracking_data.CapturedRequest(
        url=url,
        method=method,
        headers={"accept": "*/*"},
        resource_type=resource_type,
    )


def make_response(url: str = "https://example.com/api/data", status: int = 200) -> tracking_data.CapturedResponse:
    return tracking_data.CapturedResponse(url=url, status=status, headers={"content-type": "text/html"})


@pytest.fixture()
def sample_cookie() -> tracking_data.RawCookie:
    """A first-party preference cookie that trips no heuristic."""
    return make_cookie()


@pytest.fixture()
def tracking_cookie() -> tracking_data.RawCookie:
    """A Google Analytics cookie set on the site's own domain."""
    return make_cookie("_ga", "GA1.2.123456789.1234567890", ".example.com", expires=1893456000)


@pytest.fixture()
def third_party_cookie() -> tracking_data.RawCookie:
    """A DoubleClick cookie."""
    return make_cookie("IDE", "xyz", "doubleclick.net", expires=1893456000, same_site="None")


@pytest.fixture()
def site_requests() -> list[tracking_data.CapturedRequest]:
    """Two first-party requests and two tracker requests."""
    return [
        make_request("https://example.com/", resource_type="document"),
        make_request("https://www.google-analytics.com/g/collect?v=2", method="POST"),
        make_request("https://example.com/js/app.js", resource_type="script"),
        make_request("https://ad.doubleclick.net/activity", resource_type="image"),
    ]


@pytest.fixture()
def settings(tmp_path: pathlib.Path) -> config.InvestigatorSettings:
    """Default settings writing reports into a temp folder."""
    return config.InvestigatorSettings().model_copy(update={"output_dir": str(tmp_path)})


# ── Fake Browser Driver ─────────────────────────────────────────


class FakeDriver:
    """Replays fixed requests, responses and cookies without a browser.

    Requests and responses are fed into the capture buffer on
    navigation; ``late_requests`` arrive when the page is scrolled.
    Waits are recorded instead of slept.
    """

    def __init__(
        self,
        *,
        requests: list[tracking_data.CapturedRequest] | None = None,
        responses: list[tracking_data.CapturedResponse] | None = None,
        cookies: list[tracking_data.RawCookie] | None = None,
        late_requests: list[tracking_data.CapturedRequest] | None = None,
        navigate_error: Exception | None = None,
        request_per_wait: bool = False,
    ) -> None:
        self._capture = capture.CaptureBuffer()
        self._requests = requests or []
        self._responses = responses or []
        self._cookies = cookies or []
        self._late_requests = late_requests or []
        self._navigate_error = navigate_error
        self._request_per_wait = request_per_wait

        self.launched_with: config.InvestigatorSettings | None = None
        self.navigations: list[tuple[str, str, int]] = []
        self.waits: list[int] = []
        self.scrolled = False
        self.close_calls = 0

    @property
    def capture(self) -> capture.CaptureBuffer:
        return self._capture

    async def launch(self, settings: config.InvestigatorSettings) -> None:
        self.launched_with = settings

    async def navigate(self, url: str, wait_until: config.WaitUntil, timeout_ms: int) -> int | None:
        self.navigations.append((url, wait_until, timeout_ms))
        if self._navigate_error is not None:
            raise self._navigate_error
        for request in self._requests:
            self._capture.record_request(request)
        for response in self._responses:
            self._capture.record_response(response)
        return 200

    async def scroll_to_bottom(self) -> None:
        self.scrolled = True
        for request in self._late_requests:
            self._capture.record_request(request)

    async def wait(self, ms: int) -> None:
        self.waits.append(ms)
        if self._request_per_wait:
            self._capture.record_request(make_request(f"https://example.com/poll/{len(self.waits)}"))

    async def get_cookies(self) -> list[tracking_data.RawCookie]:
        return list(self._cookies)

    async def close(self) -> None:
        self.close_calls += 1
