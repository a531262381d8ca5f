"""Pydantic models for per-cookie verdicts and the final run report."""

from __future__ import annotations

from typing import Self

import pydantic

from cookie_investigator.models import tracking_data
from cookie_investigator.utils import serialization


class CookieVerdict(pydantic.BaseModel):
    """Classification result for a single cookie."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True, frozen=True
    )

    name: str
    value: str
    domain: str
    path: str
    expires_iso: str
    http_only: bool
    secure: bool
    same_site: tracking_data.SameSite | None
    size_bytes: int
    suspicious: bool
    reasons: list[str] = pydantic.Field(default_factory=list)

    @pydantic.model_validator(mode="after")
    def _suspicious_matches_reasons(self) -> Self:
        if self.suspicious != bool(self.reasons):
            raise ValueError("suspicious must be true exactly when reasons are present")
        return self


class Report(pydantic.BaseModel):
    """Structured result of one investigation run."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True, frozen=True
    )

    website: str
    timestamp: str
    total_cookies: int
    suspicious_cookie_count: int
    cookies: list[CookieVerdict] = pydantic.Field(default_factory=list)
    tracking_requests: list[tracking_data.CapturedRequest] = pydantic.Field(default_factory=list)
    recommendations: list[str] = pydantic.Field(default_factory=list)

    @pydantic.model_validator(mode="after")
    def _counts_match_cookies(self) -> Self:
        if self.total_cookies != len(self.cookies):
            raise ValueError("total_cookies must equal the number of cookies")
        if self.suspicious_cookie_count != sum(1 for c in self.cookies if c.suspicious):
            raise ValueError("suspicious_cookie_count must equal the number of suspicious cookies")
        return self

    def to_json(self) -> str:
        """Serialise with camelCase keys and two-space indentation."""
        return self.model_dump_json(by_alias=True, indent=2)
