"""Local feed dump source (replays a saved channel feed JSON)."""

from __future__ import annotations

from pathlib import Path

from parking_feed.core.logging import get_logger
from .base import BaseSource

log = get_logger("ingestion.file")


class FileFeedSource(BaseSource):
    """Reads a saved feed JSON document from disk."""

    name = "file"

    def __init__(self, file_path: str):
        self.file_path = Path(file_path)

    def fetch(self) -> str:
        if not self.file_path.exists():
            log.warning(f"Feed file not found: {self.file_path}")
            return ""

        try:
            body = self.file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            log.opt(exception=exc).error(f"Problem reading feed file {self.file_path}")
            return ""

        log.info(f"Loaded {len(body)} chars from {self.file_path}")
        return body
