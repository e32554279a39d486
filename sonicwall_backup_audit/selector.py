from __future__ import annotations

from typing import Any, Iterator

from .models import BackupRecord, Found, NotFound, Outcome

LATEST_FLAG = "YES"

# BackupRecord field -> key inside a prefFileList entry
FILE_FIELDS = {
    "pref_file_id": "prefFileID",
    "file_name": "fileName",
    "file_type": "fileType",
    "description": "description",
    "created_on": "createdOn",
    "created_time_in_sec": "createdTimeInSec",
    "file_size": "fileSize",
    "pin_it": "pinIt",
    "gold_standard": "goldStandard",
    "comments": "comments",
    "firmware_available": "firmwareAvailable",
    "release_notes_uri": "releaseNotesUri",
    "backup_username": "backupUsername",
    "firmware_build_datetime": "firmwareBuildDatetime",
}


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def iter_latest_backups(payload: dict[str, Any], serial: str) -> Iterator[BackupRecord]:
    content = payload.get("content")
    if not isinstance(content, dict):
        return
    serial_number = _text(content.get("serialNumber")) or serial
    for group in _as_list(content.get("prefFileVerList")):
        if not isinstance(group, dict):
            continue
        for entry in _as_list(group.get("prefFileList")):
            if not isinstance(entry, dict) or entry.get("latestBackUp") != LATEST_FLAG:
                continue
            yield BackupRecord(
                serial_number=serial_number,
                firmware_version=_text(group.get("firmwareVersion")),
                file_count=_text(group.get("pFileCnt")),
                is_gold_standard=_text(group.get("isGoldStandard")),
                **{field: _text(entry.get(key)) for field, key in FILE_FIELDS.items()},
            )


def select_outcome(payload: dict[str, Any], serial: str) -> list[Outcome]:
    found: list[Outcome] = [Found(record) for record in iter_latest_backups(payload, serial)]
    if not found:
        return [NotFound(serial)]
    return found
