"""Writing finished reports to disk.

One JSON file per run, named ``cookie-report-<epoch-ms>.json``.
Files are created exclusively so an earlier report is never
overwritten; on a name clash the millisecond stamp is bumped.
"""

from __future__ import annotations

import pathlib
from datetime import UTC, datetime

from cookie_investigator.models import report as report_model
from cookie_investigator.utils import logger

log = logger.create_logger("ReportFile")

REPORT_PREFIX = "cookie-report-"


def report_filename(stamp_ms: int) -> str:
    """Return the report filename for an epoch-millisecond stamp."""
    return f"{REPORT_PREFIX}{stamp_ms}.json"


def save_report(
    report: report_model.Report,
    output_dir: str | pathlib.Path = ".",
    now: datetime | None = None,
) -> pathlib.Path:
    """Write *report* as JSON into *output_dir*.

    Args:
        report: The finished report.
        output_dir: Destination folder, created if missing.
        now: Moment used for the filename; the current time when omitted.

    Returns:
        The path of the file written.
    """
    directory = pathlib.Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)

    stamp = int((now or datetime.now(UTC)).timestamp() * 1000)
    payload = report.to_json()
    while True:
        path = directory / report_filename(stamp)
        try:
            with open(path, "x", encoding="utf-8") as f:
                f.write(payload)
        except FileExistsError:
            log.debug("Report file exists, bumping timestamp", {"path": str(path)})
            stamp += 1
            continue
        log.debug("Report written", {"path": str(path), "bytes": len(payload)})
        return path
