"""Pydantic models for data captured from the browser during a run."""

from __future__ import annotations

from typing import Literal

import pydantic

from cookie_investigator.utils import serialization

SameSite = Literal["Strict", "Lax", "None"]


class CapturedRequest(pydantic.BaseModel):
    """An outgoing network request observed while the page was open."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True, frozen=True
    )

    url: str
    method: str
    headers: dict[str, str] = pydantic.Field(default_factory=dict)
    resource_type: str


class CapturedResponse(pydantic.BaseModel):
    """An incoming response observed while the page was open."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True, frozen=True
    )

    url: str
    status: int
    headers: dict[str, str] = pydantic.Field(default_factory=dict)
    from_cache: bool = False


class RawCookie(pydantic.BaseModel):
    """A cookie read from the browser context's cookie jar.

    ``expires`` is epoch seconds; ``None`` marks a session cookie.
    ``same_site`` is ``None`` when the attribute was not set.
    """

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True, frozen=True
    )

    name: str
    value: str = ""
    domain: str = ""
    path: str = "/"
    expires: float | None = None
    http_only: bool = False
    secure: bool = False
    same_site: SameSite | None = None
