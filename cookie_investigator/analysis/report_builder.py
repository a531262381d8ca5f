"""Report assembly.

Pure aggregation of classifier output into a Report. Writing the
report to disk is handled separately by ``utils.report_file``.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from cookie_investigator.analysis import recommendations
from cookie_investigator.models import report, tracking_data
from cookie_investigator.utils import serialization


def build(
    site_url: str,
    verdicts: Sequence[report.CookieVerdict],
    flagged_requests: Sequence[tracking_data.CapturedRequest],
    now: datetime | None = None,
) -> report.Report:
    """Assemble the final report for *site_url*.

    Args:
        site_url: The investigated URL, recorded as ``website``.
        verdicts: Per-cookie classification results.
        flagged_requests: Tracking-related requests.
        now: Report timestamp; the current UTC time when omitted.

    Returns:
        The immutable Report.
    """
    moment = now or datetime.now(UTC)
    return report.Report(
        website=site_url,
        timestamp=serialization.to_iso_timestamp(moment),
        total_cookies=len(verdicts),
        suspicious_cookie_count=sum(1 for v in verdicts if v.suspicious),
        cookies=list(verdicts),
        tracking_requests=list(flagged_requests),
        recommendations=recommendations.recommend(verdicts, flagged_requests),
    )
