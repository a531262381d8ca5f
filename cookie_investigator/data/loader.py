"""
Data loader for the cookie and request heuristic rule tables.
Loads JSON files and compiles cookie patterns into regex objects.

The bundled rule files live in the ``rules/`` directory next to this
module. ``load_rules`` reads the same three files from any other
directory so a run can swap in its own tables.
"""

from __future__ import annotations

import json
import pathlib
import re
from typing import Any

from cookie_investigator.models import rules
from cookie_investigator.utils import logger

log = logger.create_logger("Rules")

# Resolve path to the bundled rules directory
_RULES_DIR = pathlib.Path(__file__).resolve().parent / "rules"

COOKIE_PATTERNS_FILE = "cookie-patterns.json"
TRACKER_DOMAINS_FILE = "tracker-domains.json"
REQUEST_KEYWORDS_FILE = "request-keywords.json"

# ============================================================================
# JSON File Loading
# ============================================================================


def _load_json(path: pathlib.Path) -> Any:
    """Load and parse a JSON rule file.

    Raises:
        FileNotFoundError: If the JSON file does not exist.
        json.JSONDecodeError: If the file contains invalid JSON.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rule file not found: {path}")
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as exc:
            raise json.JSONDecodeError(
                f"Invalid JSON in {path.name}: {exc.msg}",
                exc.doc,
                exc.pos,
            ) from exc


def _load_string_list(path: pathlib.Path) -> list[str]:
    """Load a JSON array of strings."""
    raw = _load_json(path)
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise ValueError(f"Expected a JSON array of strings in {path.name}")
    return raw


# ============================================================================
# Cookie Pattern Loading
# ============================================================================


def _load_cookie_patterns(path: pathlib.Path) -> list[rules.CookiePattern]:
    """Load cookie patterns from a JSON file.

    Compiles each regex once, case-insensitive, so that
    matching is fast for every cookie in the jar.
    """
    raw: list[dict[str, str]] = _load_json(path)
    return [
        rules.CookiePattern(
            pattern=entry["pattern"],
            reason=entry["reason"],
            compiled=re.compile(entry["pattern"], re.IGNORECASE),
        )
        for entry in raw
    ]


_cookie_patterns: list[rules.CookiePattern] | None = None
_tracker_domains: list[str] | None = None
_request_keywords: list[str] | None = None
_default_rules: rules.RuleSet | None = None


def get_cookie_patterns() -> list[rules.CookiePattern]:
    """Get the bundled cookie patterns (lazy loaded and cached)."""
    global _cookie_patterns
    if _cookie_patterns is None:
        _cookie_patterns = _load_cookie_patterns(_RULES_DIR / COOKIE_PATTERNS_FILE)
    return _cookie_patterns


def get_tracker_domains() -> list[str]:
    """Get the bundled tracker domain list (lazy loaded and cached)."""
    global _tracker_domains
    if _tracker_domains is None:
        _tracker_domains = _load_string_list(_RULES_DIR / TRACKER_DOMAINS_FILE)
    return _tracker_domains


def get_request_keywords() -> list[str]:
    """Get the bundled request URL keywords (lazy loaded and cached)."""
    global _request_keywords
    if _request_keywords is None:
        _request_keywords = _load_string_list(_RULES_DIR / REQUEST_KEYWORDS_FILE)
    return _request_keywords


def get_default_rules() -> rules.RuleSet:
    """Get the bundled rule set (lazy loaded and cached)."""
    global _default_rules
    if _default_rules is None:
        _default_rules = rules.RuleSet(
            cookie_patterns=get_cookie_patterns(),
            tracker_domains=get_tracker_domains(),
            request_keywords=get_request_keywords(),
        )
    return _default_rules


def load_rules(directory: str | pathlib.Path) -> rules.RuleSet:
    """Load a rule set from *directory*.

    Any of the three rule files missing from *directory* falls back
    to the bundled table.

    Args:
        directory: Folder holding ``cookie-patterns.json``,
            ``tracker-domains.json`` and/or ``request-keywords.json``.

    Returns:
        A RuleSet combining the custom and bundled tables.
    """
    base = pathlib.Path(directory)
    if not base.is_dir():
        raise FileNotFoundError(f"Rules directory not found: {base}")

    patterns_path = base / COOKIE_PATTERNS_FILE
    domains_path = base / TRACKER_DOMAINS_FILE
    keywords_path = base / REQUEST_KEYWORDS_FILE

    rule_set = rules.RuleSet(
        cookie_patterns=_load_cookie_patterns(patterns_path) if patterns_path.exists() else get_cookie_patterns(),
        tracker_domains=_load_string_list(domains_path) if domains_path.exists() else get_tracker_domains(),
        request_keywords=_load_string_list(keywords_path) if keywords_path.exists() else get_request_keywords(),
    )
    log.info(
        "Loaded custom rules",
        {
            "directory": str(base),
            "cookiePatterns": len(rule_set.cookie_patterns),
            "trackerDomains": len(rule_set.tracker_domains),
            "requestKeywords": len(rule_set.request_keywords),
        },
    )
    return rule_set
