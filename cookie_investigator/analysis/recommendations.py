"""Advisory recommendations derived from the classifier output."""

from __future__ import annotations

from collections.abc import Sequence

from cookie_investigator.analysis import cookie_classifier
from cookie_investigator.models import report, tracking_data

# More flagged requests than this triggers the auditing advice.
HIGH_TRACKING_REQUEST_THRESHOLD = 10

REVIEW_SUSPICIOUS_COOKIES = "Review suspicious cookies and verify they are intentionally added"
CHECK_CONSENT = "Check if cookie consent mechanisms are properly implemented"
AUDIT_THIRD_PARTY_SCRIPTS = "High number of tracking requests detected - consider auditing third-party scripts"
THIRD_PARTY_COMPLIANCE = "Third-party cookies detected - ensure GDPR/privacy compliance"
REGULAR_AUDIT = "Regularly audit cookies and tracking mechanisms"
CONTENT_SECURITY_POLICY = "Implement Content Security Policy (CSP) to control resource loading"

CLOSING_RECOMMENDATIONS = (REGULAR_AUDIT, CONTENT_SECURITY_POLICY)


def recommend(
    verdicts: Sequence[report.CookieVerdict],
    flagged_requests: Sequence[tracking_data.CapturedRequest],
) -> list[str]:
    """Build the recommendation list for a run.

    Each rule fires independently and in a fixed order; the two
    closing recommendations are always present at the end.
    """
    recommendations: list[str] = []

    if any(v.suspicious for v in verdicts):
        recommendations.append(REVIEW_SUSPICIOUS_COOKIES)
        recommendations.append(CHECK_CONSENT)

    if len(flagged_requests) > HIGH_TRACKING_REQUEST_THRESHOLD:
        recommendations.append(AUDIT_THIRD_PARTY_SCRIPTS)

    if any(cookie_classifier.is_third_party_verdict(v) for v in verdicts):
        recommendations.append(THIRD_PARTY_COMPLIANCE)

    recommendations.extend(CLOSING_RECOMMENDATIONS)
    return recommendations
