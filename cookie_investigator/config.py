"""
Run configuration for the investigator.

Browser launch flags, navigation wait strategy, settle timings and
output location were fixed constants in the first version of the
tool; they are now read from ``COOKIE_INVESTIGATOR_*`` environment
variables (or a ``.env`` file) with the same defaults.

Uses ``pydantic_settings.BaseSettings`` for environment variable
binding, type coercion, and validation.
"""

from __future__ import annotations

from typing import Literal

import pydantic
import pydantic_settings

WaitUntil = Literal["commit", "domcontentloaded", "load", "networkidle"]
SettleStrategyName = Literal["fixed", "network-quiet"]

DEFAULT_BROWSER_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--no-first-run",
    "--no-zygote",
    "--disable-gpu",
]

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"
    " (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class InvestigatorSettings(pydantic_settings.BaseSettings):
    """Settings for one investigation run.

    Attributes:
        headless: Launch the browser without a window.
        browser_args: Extra Chromium process flags.
        user_agent: User agent for the browsing context.
        accept_downloads: Whether the context accepts downloads.
        wait_until: Playwright load state that ends navigation.
        navigation_timeout_ms: Navigation timeout.
        settle_strategy: ``fixed`` delay or ``network-quiet`` polling.
        settle_ms: Settle time after navigation (maximum wait for
            ``network-quiet``).
        scroll_settle_ms: Settle time after scrolling to the bottom.
        quiet_window_ms: Request-free window that ends ``network-quiet``.
        output_dir: Folder that receives the report file.
        rules_dir: Optional folder with custom rule tables.
    """

    model_config = pydantic_settings.SettingsConfigDict(populate_by_name=True, extra="ignore")

    headless: bool = pydantic.Field(
        default=False, validation_alias="COOKIE_INVESTIGATOR_HEADLESS"
    )
    browser_args: list[str] = pydantic.Field(
        default_factory=lambda: list(DEFAULT_BROWSER_ARGS),
        validation_alias="COOKIE_INVESTIGATOR_BROWSER_ARGS",
    )
    user_agent: str = pydantic.Field(
        default=DEFAULT_USER_AGENT, validation_alias="COOKIE_INVESTIGATOR_USER_AGENT"
    )
    accept_downloads: bool = pydantic.Field(
        default=True, validation_alias="COOKIE_INVESTIGATOR_ACCEPT_DOWNLOADS"
    )
    wait_until: WaitUntil = pydantic.Field(
        default="domcontentloaded", validation_alias="COOKIE_INVESTIGATOR_WAIT_UNTIL"
    )
    navigation_timeout_ms: int = pydantic.Field(
        default=60000, gt=0, validation_alias="COOKIE_INVESTIGATOR_NAVIGATION_TIMEOUT_MS"
    )
    settle_strategy: SettleStrategyName = pydantic.Field(
        default="fixed", validation_alias="COOKIE_INVESTIGATOR_SETTLE_STRATEGY"
    )
    settle_ms: int = pydantic.Field(
        default=8000, ge=0, validation_alias="COOKIE_INVESTIGATOR_SETTLE_MS"
    )
    scroll_settle_ms: int = pydantic.Field(
        default=2000, ge=0, validation_alias="COOKIE_INVESTIGATOR_SCROLL_SETTLE_MS"
    )
    quiet_window_ms: int = pydantic.Field(
        default=1500, gt=0, validation_alias="COOKIE_INVESTIGATOR_QUIET_WINDOW_MS"
    )
    output_dir: str = pydantic.Field(
        default=".", validation_alias="COOKIE_INVESTIGATOR_OUTPUT_DIR"
    )
    rules_dir: str | None = pydantic.Field(
        default=None, validation_alias="COOKIE_INVESTIGATOR_RULES_DIR"
    )
