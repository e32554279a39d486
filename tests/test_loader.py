from pathlib import Path

import pytest

from sonicwall_backup_audit.loader import InputNotFound, read_identifiers


def test_read_identifiers_preserves_leading_zeros_and_order(tmp_path: Path) -> None:
    path = tmp_path / "serials.txt"
    path.write_text("00123456\nABC123XYZ789\n0040103F1A2B\n", encoding="utf-8")
    assert read_identifiers(path) == ["00123456", "ABC123XYZ789", "0040103F1A2B"]


def test_read_identifiers_keeps_blank_lines_and_strips_crlf(tmp_path: Path) -> None:
    path = tmp_path / "serials.txt"
    path.write_bytes(b"\xef\xbb\xbfSERIAL1\r\n\r\n   \r\nSERIAL2")
    assert read_identifiers(path) == ["SERIAL1", "", "   ", "SERIAL2"]


def test_read_identifiers_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "serials.txt"
    path.write_text("", encoding="utf-8")
    assert read_identifiers(path) == []


def test_missing_input_raises_input_not_found(tmp_path: Path) -> None:
    with pytest.raises(InputNotFound):
        read_identifiers(tmp_path / "nope.txt")


def test_directory_is_not_an_input_file(tmp_path: Path) -> None:
    with pytest.raises(InputNotFound):
        read_identifiers(tmp_path)
