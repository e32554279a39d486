from __future__ import annotations

import logging
from typing import Any

import requests

LOGGER = logging.getLogger(__name__)


class FetchError(RuntimeError):
    def __init__(self, serial: str, cause: str) -> None:
        super().__init__(f"{serial}: {cause}")
        self.serial = serial
        self.cause = cause


def build_session(user_agent: str) -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent})
    return session


def fetch_backup_prefs(
    session: requests.Session,
    serial: str,
    *,
    authorization: str,
    base_url: str,
    timeout_sec: float,
) -> dict[str, Any]:
    headers = {
        "Accept": "application/json",
        "Authorization": authorization,
    }
    try:
        response = session.get(
            base_url,
            params={"serial": serial},
            headers=headers,
            timeout=timeout_sec,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(serial, str(exc)) from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise FetchError(serial, f"Malformed JSON body: {exc}") from exc
    if not isinstance(payload, dict):
        raise FetchError(serial, f"Unexpected JSON body of type {type(payload).__name__}")
    LOGGER.debug("HTTP %s for %s", response.status_code, serial)
    return payload
