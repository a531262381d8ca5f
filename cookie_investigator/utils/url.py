"""
URL and domain utility functions for cookie classification.
"""

from __future__ import annotations

from urllib import parse


def is_http_url(url: str | None) -> bool:
    """Return ``True`` when *url* looks like an http(s) address."""
    return bool(url) and url.startswith("http")


def extract_domain(url: str) -> str:
    """Extract the hostname from a URL string."""
    try:
        parsed = parse.urlparse(url)
        return parsed.hostname or "unknown"
    except ValueError:
        return "unknown"


def is_first_party_domain(cookie_domain: str, site_hostname: str) -> bool:
    """Loose first-party check between a cookie domain and a page host.

    A cookie counts as first-party when its domain (leading dot
    removed) contains the site hostname or is contained in it.
    This is plain substring containment, not a public-suffix
    comparison, so ``ample.com`` is first-party on ``example.com``.

    Args:
        cookie_domain: Domain attribute of the cookie, e.g.
            ``".example.com"``.
        site_hostname: Hostname of the investigated page.

    Returns:
        ``True`` when either string contains the other.
    """
    domain = cookie_domain.removeprefix(".")
    return site_hostname in domain or domain in site_hostname
