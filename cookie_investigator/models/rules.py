"""Pydantic models for the heuristic rule tables used by the classifiers."""

from __future__ import annotations

import re

import pydantic


class CookiePattern(pydantic.BaseModel):
    """Cookie name/value pattern with pre-compiled regex for matching."""

    model_config = pydantic.ConfigDict(arbitrary_types_allowed=True)

    pattern: str
    reason: str
    compiled: re.Pattern[str] = pydantic.Field(exclude=True)


class RuleSet(pydantic.BaseModel):
    """All rule tables consulted during one classification pass."""

    cookie_patterns: list[CookiePattern]
    tracker_domains: list[str]
    request_keywords: list[str]
