"""Cookie classification.

Runs every captured cookie through three independent heuristics
(keyword patterns, long encoded values, loose third-party domain
check) and records a human-readable reason for each hit.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from cookie_investigator.data import loader
from cookie_investigator.models import report, rules, tracking_data
from cookie_investigator.utils import serialization, url

LONG_VALUE_MIN_LENGTH = 20
LONG_VALUE_REASON = "Long encoded value - potential tracking ID"
THIRD_PARTY_REASON_PREFIX = "Third-party domain"
SESSION_EXPIRY = "Session"

_ENCODED_VALUE = re.compile(r"^[a-zA-Z0-9+/=_-]+$")


def _format_expiry(expires: float | None) -> str:
    if expires is None or expires <= 0:
        return SESSION_EXPIRY
    return serialization.epoch_to_iso(expires)


def _looks_encoded(value: str) -> bool:
    return len(value) > LONG_VALUE_MIN_LENGTH and _ENCODED_VALUE.match(value) is not None


def classify(
    cookie: tracking_data.RawCookie,
    site_url: str,
    rule_set: rules.RuleSet | None = None,
) -> report.CookieVerdict:
    """Classify a single cookie against the heuristic rules.

    Args:
        cookie: Cookie read from the browser context.
        site_url: URL of the investigated page.
        rule_set: Rule tables to use; the bundled rules when omitted.

    Returns:
        A CookieVerdict that is suspicious exactly when at least one
        reason was recorded.
    """
    rule_set = rule_set or loader.get_default_rules()
    reasons: list[str] = []

    for cookie_pattern in rule_set.cookie_patterns:
        if cookie_pattern.compiled.search(cookie.name) or cookie_pattern.compiled.search(cookie.value):
            reasons.append(cookie_pattern.reason)

    if _looks_encoded(cookie.value):
        reasons.append(LONG_VALUE_REASON)

    if not url.is_first_party_domain(cookie.domain, url.extract_domain(site_url)):
        reasons.append(f"{THIRD_PARTY_REASON_PREFIX}: {cookie.domain}")

    return report.CookieVerdict(
        name=cookie.name,
        value=cookie.value,
        domain=cookie.domain,
        path=cookie.path,
        expires_iso=_format_expiry(cookie.expires),
        http_only=cookie.http_only,
        secure=cookie.secure,
        same_site=cookie.same_site,
        size_bytes=len(cookie.value),
        suspicious=bool(reasons),
        reasons=reasons,
    )


def classify_all(
    cookies: Iterable[tracking_data.RawCookie],
    site_url: str,
    rule_set: rules.RuleSet | None = None,
) -> list[report.CookieVerdict]:
    """Classify every cookie in a snapshot, preserving order."""
    rule_set = rule_set or loader.get_default_rules()
    return [classify(cookie, site_url, rule_set) for cookie in cookies]


def is_third_party_verdict(verdict: report.CookieVerdict) -> bool:
    """Whether the verdict carries a third-party domain reason."""
    return any(reason.startswith(THIRD_PARTY_REASON_PREFIX) for reason in verdict.reasons)
