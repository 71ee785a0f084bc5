"""Reading and writing quote export files."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quotekeeper.domain.errors import QuoteImportError

if TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)

EXPORT_FILENAME = "quotes.json"


def read_quote_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise QuoteImportError(f"Error reading file {path}: {exc}") from exc


def write_quote_file(path: Path, content: str) -> Path:
    """Write exported JSON, using ``quotes.json`` inside ``path`` when it is a directory."""

    target = path / EXPORT_FILENAME if path.is_dir() else path
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content + "\n", encoding="utf-8")
    log.info("Exported quotes to %s", target)
    return target
