"""Tests for cookie_investigator.analysis.request_classifier."""

from __future__ import annotations

import pytest

from conftest import make_request
from cookie_investigator.analysis import request_classifier
from cookie_investigator.models import rules, tracking_data


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.google-analytics.com/g/collect",
            "https://www.googletagmanager.com/gtm.js?id=GTM-XXXX",
            "https://ad.doubleclick.net/activity",
            "https://www.facebook.com/tr?id=1",
            "https://connect.facebook.net/en_US/fbevents.js",
            "https://static.hotjar.com/c/hotjar-1.js",
            "https://api-js.mixpanel.com/track",
            "https://cdn.segment.com/analytics.js/v1/key/analytics.min.js",
            "https://api2.amplitude.com/2/httpapi",
            "https://edge.fullstory.com/s/fs.js",
            "https://example.com/track/event",
            "https://example.com/analytics/beacon",
            "https://example.com/pixel.gif",
        ],
    )
    def test_flags_tracker(self, url: str) -> None:
        assert request_classifier.classify([make_request(url)]) == [make_request(url)]

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/js/app.js",
            "https://cdn.example.com/Track.js",
            "https://fonts.gstatic.com/s/roboto.woff2",
        ],
    )
    def test_ignores_benign(self, url: str) -> None:
        assert request_classifier.classify([make_request(url)]) == []

    def test_order_preserved(self, site_requests: list[tracking_data.CapturedRequest]) -> None:
        flagged = request_classifier.classify(site_requests)
        assert [r.url for r in flagged] == [
            "https://www.google-analytics.com/g/collect?v=2",
            "https://ad.doubleclick.net/activity",
        ]

    def test_no_duplicates_introduced(self) -> None:
        # Matches both a tracker domain and two keywords.
        request = make_request("https://www.google-analytics.com/analytics/track")
        assert len(request_classifier.classify([request])) == 1

    def test_empty(self) -> None:
        assert request_classifier.classify([]) == []


class TestInjectedRules:
    def test_custom_domains_and_keywords(self) -> None:
        rule_set = rules.RuleSet(cookie_patterns=[], tracker_domains=["tracker.test"], request_keywords=["beacon"])
        requests = [
            make_request("https://tracker.test/x"),
            make_request("https://example.com/beacon"),
            make_request("https://www.google-analytics.com/collect"),
        ]
        flagged = request_classifier.classify(requests, rule_set)
        assert [r.url for r in flagged] == ["https://tracker.test/x", "https://example.com/beacon"]

    def test_is_tracking_request(self) -> None:
        rule_set = rules.RuleSet(cookie_patterns=[], tracker_domains=[], request_keywords=[])
        assert request_classifier.is_tracking_request(make_request("https://example.com/track"), rule_set) is False
