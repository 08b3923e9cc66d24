"""Flat-file repository for API key records."""

import logging
from pathlib import Path
from typing import List

from app.domain.errors import PersistenceError
from app.domain.models import ApiKeyRecord
from app.infrastructure.persistence.record_codec import FILE_HEADER, parse_document, render_document

logger = logging.getLogger(__name__)


class FileApiKeyRepository:
    """
    Stores every API key record in a single UTF-8 text file.

    The whole file is read on every load and rewritten on every save. There is
    no locking and no atomic rename: two concurrent writers race and the last
    rewrite wins, silently dropping the other change.

    Filesystem failures never reach the caller. A failed read is logged and
    reported as an empty store; a failed write is logged and dropped.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def initialize(self) -> None:
        """Create the key file with its header if it doesn't exist."""
        try:
            self._ensure_file()
        except PersistenceError as exc:
            logger.error("Error initializing API keys file %s: %s", self.path, exc.cause or exc)

    def load_all(self) -> List[ApiKeyRecord]:
        """Read and parse every record, or return an empty list on failure."""
        try:
            return parse_document(self._read())
        except PersistenceError as exc:
            logger.error("Error loading API keys from %s: %s", self.path, exc.cause or exc)
            return []

    def save_all(self, records: List[ApiKeyRecord]) -> None:
        """Rewrite the file with ``records``; failures are logged and dropped."""
        try:
            self._write(render_document(records))
        except PersistenceError as exc:
            logger.error("Error saving API keys to %s: %s", self.path, exc.cause or exc)

    def _ensure_file(self) -> None:
        try:
            if not self.path.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.write_text(FILE_HEADER + "\n", encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Unable to create {self.path}", exc) from exc

    def _read(self) -> str:
        self._ensure_file()
        try:
            return self.path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise PersistenceError(f"Unable to read {self.path}", exc) from exc

    def _write(self, content: str) -> None:
        self._ensure_file()
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Unable to write {self.path}", exc) from exc
