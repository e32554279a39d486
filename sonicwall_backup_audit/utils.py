from __future__ import annotations

import logging
import os
from pathlib import Path


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def atomic_write_text(path: Path, content: str) -> None:
    ensure_dir(path.parent)
    tmp = path.with_suffix(path.suffix + ".tmp")
    # newline="" keeps the csv line terminator as written
    with tmp.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)
    os.replace(tmp, path)


def mask_credential(value: str | None) -> str:
    """Return a loggable form of an Authorization value.

    Keeps the scheme word (e.g. ``Bearer``) and the last four characters of
    the token; everything else is replaced with asterisks.
    """
    text = (value or "").strip()
    if not text:
        return "<empty>"
    scheme, _, token = text.partition(" ")
    if not token:
        scheme, token = "", scheme
    tail = token[-4:] if len(token) > 8 else ""
    masked = f"****{tail}"
    return f"{scheme} {masked}" if scheme else masked
