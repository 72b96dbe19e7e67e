"""
JSON document persistence adapter.

The whole dataset (users, profiles with their embedded comments, sessions)
lives in one JSON file. ``DocumentStore`` keeps it in memory and rewrites the
whole file on every mutation; ``transaction()`` is the single gateway through
which mutations pass.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator
import json
import logging
import os
import threading

logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "profiles", "sessions")


def empty_document() -> dict:
    return {name: [] for name in COLLECTIONS}


def load(path: Path) -> dict:
    if path.exists():
        raw = path.read_text(encoding="utf-8")
        if raw.strip():
            return db_defaults(json.loads(raw))
    return empty_document()


def save(path: Path, db: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    tmp.write_text(json.dumps(db, ensure_ascii=False, indent=2), encoding="utf-8")
    os.replace(tmp, path)


def db_defaults(db: dict | None) -> dict:
    if not isinstance(db, dict):
        return empty_document()
    for name in COLLECTIONS:
        if not isinstance(db.get(name), list):
            db[name] = []
    return db


class DocumentStore:
    """In-memory JSON document with whole-file persistence."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._data: dict | None = None
        self._lock = threading.RLock()

    def read_all(self) -> dict:
        """Return the live in-memory document, loading it on first access."""
        with self._lock:
            if self._data is None:
                self._data = load(self.path)
                logger.debug("Loaded document from %s", self.path)
            return self._data

    def persist(self) -> None:
        """Overwrite the file with the current in-memory document."""
        with self._lock:
            save(self.path, self.read_all())

    def initialize(self) -> None:
        """Load the document and write the defaults when no file exists yet."""
        with self._lock:
            self.read_all()
            if not self.path.exists():
                logger.info("Creating empty document at %s", self.path)
                self.persist()

    @contextmanager
    def transaction(self) -> Iterator[dict]:
        """
        Hold the store lock for a read-modify-write sequence and persist on a
        clean exit. Nothing is written when the block raises, so callers must
        run their checks before touching the document.
        """
        with self._lock:
            yield self.read_all()
            self.persist()

    @contextmanager
    def snapshot(self) -> Iterator[dict]:
        """Hold the lock while reading, without persisting."""
        with self._lock:
            yield self.read_all()
