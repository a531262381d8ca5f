"""
Append-only buffers for requests and responses observed on the page.

Written by the browser event callbacks and read once after the page
has settled. Everything runs on one asyncio loop, so plain lists
are enough.
"""

from __future__ import annotations

from cookie_investigator.models import tracking_data


class CaptureBuffer:
    """Requests and responses in arrival order."""

    def __init__(self) -> None:
        self._requests: list[tracking_data.CapturedRequest] = []
        self._responses: list[tracking_data.CapturedResponse] = []

    def record_request(self, request: tracking_data.CapturedRequest) -> None:
        """Append an outgoing request."""
        self._requests.append(request)

    def record_response(self, response: tracking_data.CapturedResponse) -> None:
        """Append an incoming response."""
        self._responses.append(response)

    @property
    def requests(self) -> list[tracking_data.CapturedRequest]:
        """Snapshot of the captured requests."""
        return list(self._requests)

    @property
    def responses(self) -> list[tracking_data.CapturedResponse]:
        """Snapshot of the captured responses."""
        return list(self._responses)

    @property
    def request_count(self) -> int:
        return len(self._requests)

    def clear(self) -> None:
        """Drop everything captured so far."""
        self._requests.clear()
        self._responses.clear()
