"""
Console narration of classification results.

Prints each cookie with its attributes and any suspicion reasons,
the list of tracking requests, and the closing summary.
"""

from __future__ import annotations

import pathlib
from collections.abc import Sequence

from cookie_investigator.models import report, tracking_data
from cookie_investigator.utils import logger

log = logger.create_logger("Report")

_VALUE_PREVIEW_LENGTH = 50


def preview_value(value: str) -> str:
    """Truncate a cookie value for display."""
    if len(value) > _VALUE_PREVIEW_LENGTH:
        return value[:_VALUE_PREVIEW_LENGTH] + "..."
    return value


def narrate_cookie(verdict: report.CookieVerdict) -> None:
    """Print one cookie verdict."""
    log.info(f"Cookie: {verdict.name}")
    log.detail(f"Value: {preview_value(verdict.value)}")
    log.detail(f"Domain: {verdict.domain}")
    log.detail(f"Path: {verdict.path}")
    log.detail(f"Expires: {verdict.expires_iso}")
    log.detail(f"Secure: {verdict.secure} | HttpOnly: {verdict.http_only} | SameSite: {verdict.same_site}")
    if verdict.suspicious:
        log.warn("Suspicious cookie", {"name": verdict.name, "reasons": ", ".join(verdict.reasons)})


def narrate_cookies(verdicts: Sequence[report.CookieVerdict]) -> None:
    """Print every cookie verdict under a section header."""
    log.section(f"Found {len(verdicts)} cookies")
    for verdict in verdicts:
        narrate_cookie(verdict)


def narrate_requests(flagged_requests: Sequence[tracking_data.CapturedRequest]) -> None:
    """Print the tracking-related requests."""
    log.section("Network Analysis")
    log.info(f"Found {len(flagged_requests)} potentially tracking-related requests")
    for request in flagged_requests:
        log.detail(f"{request.method} {request.url}")
        log.detail(f"   Type: {request.resource_type}")


def narrate_summary(result: report.Report, report_path: pathlib.Path) -> None:
    """Print the end-of-run summary."""
    log.subsection("Summary")
    log.success(
        "Investigation complete",
        {
            "totalCookies": result.total_cookies,
            "suspiciousCookies": result.suspicious_cookie_count,
            "trackingRequests": len(result.tracking_requests),
        },
    )
    log.info("Report saved", {"path": str(report_path)})
