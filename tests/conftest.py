from __future__ import annotations

from typing import Any

import requests


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, text: str | None = None) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=None)

    def json(self) -> Any:
        if self.text is not None:
            raise ValueError(f"Expecting value: {self.text[:20]!r}")
        return self._payload


class FakeSession:
    """Answers GETs from a serial -> response (or exception) mapping."""

    def __init__(self, responses: dict[str, Any]) -> None:
        self.responses = responses
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, *, params: dict[str, str], headers: dict[str, str], timeout: float):
        serial = params["serial"]
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        result = self.responses.get(serial)
        if result is None:
            raise requests.ConnectionError(f"no route to host for {serial}")
        if isinstance(result, Exception):
            raise result
        if isinstance(result, FakeResponse):
            return result
        return FakeResponse(result)

    def close(self) -> None:
        self.closed = True


def backup_payload(serial: str, groups: list[dict[str, Any]]) -> dict[str, Any]:
    return {"content": {"serialNumber": serial, "prefFileVerList": groups}}


def pref_file(pref_id: str, latest: str = "NO", **extra: Any) -> dict[str, Any]:
    entry = {
        "prefFileID": pref_id,
        "fileName": f"{pref_id}.exp",
        "fileType": "Preference",
        "description": "nightly",
        "createdOn": "2024-03-01 02:00:00",
        "createdTimeInSec": 1709258400,
        "fileSize": 48213,
        "pinIt": "NO",
        "goldStandard": "NO",
        "comments": None,
        "firmwareAvailable": "YES",
        "releaseNotesUri": "https://example.invalid/notes.pdf",
        "backupUsername": "admin",
        "firmwareBuildDatetime": "2023-11-20 10:15:00",
        "latestBackUp": latest,
    }
    entry.update(extra)
    return entry
