from __future__ import annotations

import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)


class InputNotFound(FileNotFoundError):
    """The serial list could not be opened; the run is aborted."""


def read_identifiers(path: str | Path) -> list[str]:
    """Read device serials, one per line, exactly as written.

    Only the line terminator is removed. Leading zeros and surrounding
    whitespace are kept, and blank lines are returned as empty strings so
    they show up in the report instead of vanishing silently.
    """
    path = Path(path)
    if not path.is_file():
        raise InputNotFound(f"Input file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputNotFound(f"Input file is not readable: {path} ({exc})") from exc
    identifiers = text.splitlines()
    LOGGER.info("Loaded %s serials from %s", len(identifiers), path)
    return identifiers
