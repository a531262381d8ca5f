"""
Command-line entry point.

Loads ``.env`` settings, validates the URL before any browser work,
runs one investigation and exits non-zero on failure.
"""

import asyncio
import pathlib

import dotenv
import typer

from cookie_investigator import config
from cookie_investigator.pipeline import investigation
from cookie_investigator.utils import errors

app = typer.Typer(help="Flag tracking cookies and requests set by a web page.", add_completion=False)

_SETTLE_STRATEGIES = ("fixed", "network-quiet")


@app.command()
def investigate(
    url: str = typer.Argument(None, help="Page to investigate, e.g. https://example.com/"),
    output_dir: pathlib.Path = typer.Option(None, "--output-dir", "-o", help="Folder for the JSON report"),
    headless: bool = typer.Option(False, "--headless", help="Run the browser without a window"),
    settle_ms: int = typer.Option(None, "--settle-ms", min=0, help="Settle time after navigation (ms)"),
    settle_strategy: str = typer.Option(None, "--settle-strategy", help="'fixed' delay or 'network-quiet' polling"),
    rules_dir: pathlib.Path = typer.Option(None, "--rules-dir", help="Folder with custom rule tables"),
) -> None:
    """Investigate the cookies and tracking requests of URL."""
    dotenv.load_dotenv()

    try:
        investigation.validate_url(url)
    except errors.InvalidUrlError as error:
        typer.secho(str(error), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from error

    if settle_strategy is not None and settle_strategy not in _SETTLE_STRATEGIES:
        typer.secho(f"Unknown settle strategy: {settle_strategy}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    overrides: dict[str, object] = {
        "output_dir": str(output_dir) if output_dir is not None else None,
        "headless": True if headless else None,
        "settle_ms": settle_ms,
        "settle_strategy": settle_strategy,
        "rules_dir": str(rules_dir) if rules_dir is not None else None,
    }
    settings = config.InvestigatorSettings().model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )

    try:
        asyncio.run(investigation.investigate(url, settings=settings))
    except Exception as error:
        typer.secho(f"Investigation failed: {errors.get_error_message(error)}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from error


def main() -> None:
    """Console script entry point."""
    app()
