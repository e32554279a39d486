from __future__ import annotations

from collections import Counter
from typing import Any, Iterable

from .models import Failed, Outcome
from .report import STATUS_FAILED, STATUS_FOUND, STATUS_NOT_FOUND, status_label


def build_audit_summary(outcomes: Iterable[Outcome]) -> dict[str, Any]:
    outcomes = list(outcomes)
    counts = Counter(status_label(outcome) for outcome in outcomes)
    return {
        "rows": len(outcomes),
        "serials": len({outcome.serial_number for outcome in outcomes}),
        "counts": {
            STATUS_FOUND: counts.get(STATUS_FOUND, 0),
            STATUS_NOT_FOUND: counts.get(STATUS_NOT_FOUND, 0),
            STATUS_FAILED: counts.get(STATUS_FAILED, 0),
        },
        "failures": [
            (outcome.serial_number, outcome.cause)
            for outcome in outcomes
            if isinstance(outcome, Failed)
        ],
    }


def format_audit_summary(summary: dict[str, Any]) -> str:
    lines = []
    lines.append("Backup Audit Summary")
    lines.append("====================")
    lines.append("Rows: {rows} Serials: {serials}".format(**summary))
    lines.append(
        "Latest backup: {YES} No backup: {NoBackup} Errors: {Error}".format(**summary["counts"])
    )

    lines.append("\nFailed serials:")
    if summary["failures"]:
        for serial, cause in summary["failures"]:
            lines.append(f"- {serial!r}: {cause}")
    else:
        lines.append("- none")

    return "\n".join(lines) + "\n"
