from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import requests
from tqdm import tqdm

from .fetcher import FetchError, build_session, fetch_backup_prefs
from .loader import read_identifiers
from .models import Failed, Found, Outcome
from .report import write_report
from .selector import select_outcome

LOGGER = logging.getLogger(__name__)


def audit_serial(
    session: requests.Session,
    serial: str,
    *,
    authorization: str,
    base_url: str,
    timeout_sec: float,
) -> list[Outcome]:
    LOGGER.info("Fetching: %s", serial)
    try:
        payload = fetch_backup_prefs(
            session,
            serial,
            authorization=authorization,
            base_url=base_url,
            timeout_sec=timeout_sec,
        )
    except FetchError as exc:
        LOGGER.warning("Failed: %s (%s)", serial, exc.cause)
        return [Failed(serial, exc.cause)]

    outcomes = select_outcome(payload, serial)
    found = sum(1 for outcome in outcomes if isinstance(outcome, Found))
    if found:
        LOGGER.info("Done: %s, %s latest backup(s)", serial, found)
    else:
        LOGGER.info("Done: %s, no latest backup", serial)
    return outcomes


def audit_identifiers(
    identifiers: Iterable[str],
    *,
    session: requests.Session,
    authorization: str,
    base_url: str,
    timeout_sec: float,
    show_progress: bool = False,
) -> list[Outcome]:
    identifiers = list(identifiers)
    outcomes: list[Outcome] = []
    for serial in tqdm(identifiers, desc="backupprefs", unit="serial", disable=not show_progress):
        outcomes.extend(
            audit_serial(
                session,
                serial,
                authorization=authorization,
                base_url=base_url,
                timeout_sec=timeout_sec,
            )
        )
    return outcomes


def run_audit(
    *,
    input_path: str | Path,
    output_path: str | Path,
    authorization: str,
    base_url: str,
    timeout_sec: float,
    user_agent: str,
    show_progress: bool = False,
    session: requests.Session | None = None,
) -> list[Outcome]:
    """Load serials, query each one in order, then write the report once.

    Raises :class:`~sonicwall_backup_audit.loader.InputNotFound` before any
    request is made if the serial list cannot be read.
    """
    identifiers = read_identifiers(input_path)
    owned = session is None
    if session is None:
        session = build_session(user_agent)
    try:
        outcomes = audit_identifiers(
            identifiers,
            session=session,
            authorization=authorization,
            base_url=base_url,
            timeout_sec=timeout_sec,
            show_progress=show_progress,
        )
    finally:
        if owned:
            session.close()
    write_report(output_path, outcomes)
    return outcomes
