"""
Network request classification against known tracker domains and
URL keywords. Matching is plain case-sensitive substring search.
"""

from __future__ import annotations

from collections.abc import Iterable

from cookie_investigator.data import loader
from cookie_investigator.models import rules, tracking_data


def is_tracking_request(request: tracking_data.CapturedRequest, rule_set: rules.RuleSet) -> bool:
    """Return ``True`` if the request URL mentions a tracker domain or keyword."""
    request_url = request.url
    return any(domain in request_url for domain in rule_set.tracker_domains) or any(
        keyword in request_url for keyword in rule_set.request_keywords
    )


def classify(
    requests: Iterable[tracking_data.CapturedRequest],
    rule_set: rules.RuleSet | None = None,
) -> list[tracking_data.CapturedRequest]:
    """Return the tracking-related subset of *requests* in arrival order."""
    rule_set = rule_set or loader.get_default_rules()
    return [request for request in requests if is_tracking_request(request, rule_set)]
