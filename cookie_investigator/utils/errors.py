"""
Exception types and error message helpers for an investigation run.
"""

from __future__ import annotations


class InvestigationError(Exception):
    """Base class for failures that abort an investigation."""


class InvalidUrlError(InvestigationError):
    """The target URL is missing or does not start with ``http``."""


class NavigationError(InvestigationError):
    """The browser could not load the target page."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"Failed to load {url}: {message}")
        self.url = url


class DriverNotLaunchedError(InvestigationError):
    """A browser operation was attempted before ``launch``."""


def get_error_message(error: BaseException | object) -> str:
    """
    Safely extract an error message from an unknown error type.
    """
    if isinstance(error, Exception):
        return str(error) or type(error).__name__
    return "Unknown error"
