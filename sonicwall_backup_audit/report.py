from __future__ import annotations

import csv
import io
import logging
from dataclasses import astuple
from pathlib import Path
from typing import Iterable

from .models import BackupRecord, Failed, Found, NotFound, Outcome
from .utils import atomic_write_text

LOGGER = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "SerialNumber",
    "FirmwareVersion",
    "FileCount",
    "IsGoldStandard",
    "PrefFileID",
    "FileName",
    "FileType",
    "Description",
    "CreatedOn",
    "CreatedTimeInSec",
    "FileSize",
    "PinIt",
    "GoldStandard",
    "Comments",
    "FirmwareAvailable",
    "ReleaseNotesUri",
    "BackupUsername",
    "FirmwareBuildDatetime",
    "LatestBackup",
]

STATUS_FOUND = "YES"
STATUS_NOT_FOUND = "NoBackup"
STATUS_FAILED = "Error"


def status_label(outcome: Outcome) -> str:
    if isinstance(outcome, Found):
        return STATUS_FOUND
    if isinstance(outcome, NotFound):
        return STATUS_NOT_FOUND
    if isinstance(outcome, Failed):
        return STATUS_FAILED
    raise TypeError(f"Unknown outcome type: {type(outcome).__name__}")


def outcome_row(outcome: Outcome) -> list[str]:
    if isinstance(outcome, Found):
        record = outcome.record
    else:
        record = BackupRecord(serial_number=outcome.serial_number)
    return [*astuple(record), status_label(outcome)]


def outcome_rows(outcomes: Iterable[Outcome]) -> list[list[str]]:
    return [outcome_row(outcome) for outcome in outcomes]


def render_report(outcomes: Iterable[Outcome]) -> str:
    buffer = io.StringIO()
    # every cell quoted so serials like 00123456 stay text when re-read
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(REPORT_COLUMNS)
    writer.writerows(outcome_rows(outcomes))
    return buffer.getvalue()


def write_report(path: str | Path, outcomes: Iterable[Outcome]) -> int:
    """Write the full report in one go, replacing ``path``. Returns the data row count."""
    outcomes = list(outcomes)
    path = Path(path)
    atomic_write_text(path, render_report(outcomes))
    LOGGER.info("Wrote %s rows to %s", len(outcomes), path)
    return len(outcomes)
