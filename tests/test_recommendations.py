"""Tests for cookie_investigator.analysis.recommendations."""

from __future__ import annotations

from conftest import make_cookie, make_request
from cookie_investigator.analysis import cookie_classifier, recommendations

SITE = "https://example.com"

CLOSING = [recommendations.REGULAR_AUDIT, recommendations.CONTENT_SECURITY_POLICY]


def _flagged(count: int) -> list:
    return [make_request(f"https://www.google-analytics.com/collect?n={i}") for i in range(count)]


class TestRecommend:
    """Tests for recommend()."""

    def test_empty_inputs_only_closing(self) -> None:
        assert recommendations.recommend([], []) == CLOSING

    def test_always_ends_with_closing(self) -> None:
        verdicts = cookie_classifier.classify_all([make_cookie("x", "y", "tracker.net")], SITE)
        result = recommendations.recommend(verdicts, _flagged(20))
        assert result[-2:] == CLOSING

    def test_suspicious_first_party_cookie(self) -> None:
        verdicts = cookie_classifier.classify_all([make_cookie("tracking_id", "abc")], SITE)
        assert recommendations.recommend(verdicts, []) == [
            recommendations.REVIEW_SUSPICIOUS_COOKIES,
            recommendations.CHECK_CONSENT,
            *CLOSING,
        ]

    def test_benign_cookie_only_closing(self) -> None:
        verdicts = cookie_classifier.classify_all([make_cookie()], SITE)
        assert recommendations.recommend(verdicts, []) == CLOSING

    def test_eleven_requests_trigger_audit(self) -> None:
        result = recommendations.recommend([], _flagged(11))
        assert recommendations.AUDIT_THIRD_PARTY_SCRIPTS in result

    def test_ten_requests_do_not_trigger_audit(self) -> None:
        result = recommendations.recommend([], _flagged(10))
        assert recommendations.AUDIT_THIRD_PARTY_SCRIPTS not in result

    def test_all_rules_in_fixed_order(self) -> None:
        verdicts = cookie_classifier.classify_all([make_cookie("IDE", "xyz", "doubleclick.net")], SITE)
        assert recommendations.recommend(verdicts, _flagged(11)) == [
            recommendations.REVIEW_SUSPICIOUS_COOKIES,
            recommendations.CHECK_CONSENT,
            recommendations.AUDIT_THIRD_PARTY_SCRIPTS,
            recommendations.THIRD_PARTY_COMPLIANCE,
            *CLOSING,
        ]

    def test_deterministic(self) -> None:
        verdicts = cookie_classifier.classify_all([make_cookie("_fbp", "fb.1.2")], SITE)
        flagged = _flagged(3)
        assert recommendations.recommend(verdicts, flagged) == recommendations.recommend(verdicts, flagged)
