"""Persistent key-value settings store.

A single JSON file maps keys to base64-encoded byte values. Every write
replaces the whole file through a temp file in the same directory, so readers
see either the old or the new contents.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class SettingsStore:
    """Byte values stored under string keys, surviving restarts."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def get(self, key: str) -> bytes | None:
        """Stored value for key, or None if absent or unreadable."""
        raw = self._read().get(key)
        if not isinstance(raw, str):
            return None
        try:
            return base64.b64decode(raw.encode("ascii"), validate=True)
        except (UnicodeEncodeError, binascii.Error) as e:
            logger.warning("Settings value %r in %s is not valid base64: %s", key, self.path, e)
            return None

    def set(self, key: str, value: bytes) -> bool:
        """Store value under key. Returns False if the file could not be written."""
        data = self._read()
        data[key] = base64.b64encode(value).decode("ascii")
        return self._write(data)

    # ── File access ──────────────────────────────────────────

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError, RecursionError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: top level is not an object", self.path)
            return {}
        return data

    def _write(self, data: dict) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
        except OSError as e:
            logger.warning("Could not prepare settings write to %s: %s", self.path, e)
            return False

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning("Could not write settings file %s: %s", self.path, e)
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            return False

        logger.debug("Saved %d settings key(s) to %s", len(data), self.path)
        return True
