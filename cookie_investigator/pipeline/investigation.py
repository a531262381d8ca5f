"""
Investigation pipeline.

Single sequential run: launch the browser, load the page, let it
settle, scroll to the bottom, snapshot cookies, classify cookies and
requests, then build and save the report. Any failure is logged and
re-raised; the browser is always closed and no report is written.
"""

from __future__ import annotations

from cookie_investigator import config
from cookie_investigator.analysis import cookie_classifier, report_builder, request_classifier
from cookie_investigator.browser import driver as driver_mod
from cookie_investigator.browser import session as browser_session
from cookie_investigator.browser import settle
from cookie_investigator.data import loader
from cookie_investigator.models import report, rules
from cookie_investigator.pipeline import narration
from cookie_investigator.utils import errors, logger, report_file, url as url_mod

log = logger.create_logger("Investigate")


def validate_url(url: str | None) -> str:
    """Return *url* if it starts with ``http``.

    Raises:
        InvalidUrlError: When the URL is missing or malformed.
    """
    if not url_mod.is_http_url(url):
        raise errors.InvalidUrlError("Please provide a valid URL starting with http:// or https://")
    return url


def resolve_rules(settings: config.InvestigatorSettings) -> rules.RuleSet:
    """Custom rules from ``settings.rules_dir``, or the bundled ones."""
    if settings.rules_dir:
        return loader.load_rules(settings.rules_dir)
    return loader.get_default_rules()


async def _capture(
    driver: driver_mod.BrowserDriver,
    url: str,
    settings: config.InvestigatorSettings,
) -> None:
    """Load the page and wait until its traffic has settled."""
    log.start_timer("browser-launch")
    await driver.launch(settings)
    log.end_timer("browser-launch", "Browser launched")

    log.start_timer("navigation")
    log.info("Loading website", {"url": url, "waitUntil": settings.wait_until})
    status_code = await driver.navigate(url, settings.wait_until, settings.navigation_timeout_ms)
    log.end_timer("navigation", "Navigation complete")
    log.info("Navigation result", {"statusCode": status_code})

    strategy = settle.create_settle_strategy(settings)
    log.info("Waiting for scripts and cookies to load", {"strategy": settings.settle_strategy})
    await strategy.settle(driver, settings.settle_ms)

    await driver.scroll_to_bottom()
    await strategy.settle(driver, settings.scroll_settle_ms)


async def investigate(
    url: str,
    driver: driver_mod.BrowserDriver | None = None,
    settings: config.InvestigatorSettings | None = None,
    rule_set: rules.RuleSet | None = None,
) -> report.Report:
    """Investigate the cookies and tracking requests of *url*.

    Args:
        url: Page to load; must start with ``http``.
        driver: Browser driver; a Playwright ``BrowserSession`` when omitted.
        settings: Run settings; read from the environment when omitted.
        rule_set: Classification rules; resolved from *settings* when omitted.

    Returns:
        The report that was written to ``settings.output_dir``.

    Raises:
        InvalidUrlError: Before any browser work for a bad URL.
        NavigationError: If the page could not be loaded.
    """
    validate_url(url)
    settings = settings or config.InvestigatorSettings()
    rule_set = rule_set or resolve_rules(settings)
    driver = driver or browser_session.BrowserSession()

    log.section(f"Investigating cookies on: {url}")
    try:
        await _capture(driver, url, settings)

        log.info("Analyzing cookies")
        cookies = await driver.get_cookies()
        requests = driver.capture.requests
        log.debug(
            "Capture complete",
            {"cookies": len(cookies), "requests": len(requests), "responses": len(driver.capture.responses)},
        )

        verdicts = cookie_classifier.classify_all(cookies, url, rule_set)
        narration.narrate_cookies(verdicts)

        flagged = request_classifier.classify(requests, rule_set)
        narration.narrate_requests(flagged)

        result = report_builder.build(url, verdicts, flagged)
        path = report_file.save_report(result, settings.output_dir)
        narration.narrate_summary(result, path)
        return result
    except Exception as error:
        log.error("Error during investigation", {"error": errors.get_error_message(error)})
        raise
    finally:
        await driver.close()
