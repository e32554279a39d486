from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BackupRecord:
    serial_number: str
    firmware_version: str = ""
    file_count: str = ""
    is_gold_standard: str = ""
    pref_file_id: str = ""
    file_name: str = ""
    file_type: str = ""
    description: str = ""
    created_on: str = ""
    created_time_in_sec: str = ""
    file_size: str = ""
    pin_it: str = ""
    gold_standard: str = ""
    comments: str = ""
    firmware_available: str = ""
    release_notes_uri: str = ""
    backup_username: str = ""
    firmware_build_datetime: str = ""


@dataclass(frozen=True, slots=True)
class Found:
    record: BackupRecord

    @property
    def serial_number(self) -> str:
        return self.record.serial_number


@dataclass(frozen=True, slots=True)
class NotFound:
    serial_number: str


@dataclass(frozen=True, slots=True)
class Failed:
    serial_number: str
    cause: str


Outcome = Found | NotFound | Failed
