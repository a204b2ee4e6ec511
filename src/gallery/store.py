"""Ordered in-memory list of people, mirrored to the settings store."""

from __future__ import annotations

import logging
from typing import Iterator

from gallery.person import Person
from gallery.storage.codec import decode_people, encode_people
from gallery.storage.settings import SettingsStore

logger = logging.getLogger(__name__)

PEOPLE_KEY = "people"


class PersonStore:
    """The record list. Callers save after every mutation."""

    def __init__(self, settings: SettingsStore, key: str = PEOPLE_KEY) -> None:
        self.settings = settings
        self.key = key
        self._people: list[Person] = []

    def load(self) -> list[Person]:
        """Replace the in-memory list with the persisted one ([] if none)."""
        self._people = decode_people(self.settings.get(self.key))
        logger.info("Loaded %d people from %s", len(self._people), self.settings.path)
        return list(self._people)

    def save(self) -> bool:
        ok = self.settings.set(self.key, encode_people(self._people))
        if not ok:
            logger.warning("People list (%d records) was not saved", len(self._people))
        return ok

    def append(self, person: Person) -> None:
        self._people.append(person)

    def rename(self, index: int, new_name: str | None) -> bool:
        """Set the name of the record at index. No-op (False) if out of range."""
        if not isinstance(new_name, str) or not 0 <= index < len(self._people):
            return False
        self._people[index] = self._people[index].renamed(new_name)
        return True

    # ── Read access ──────────────────────────────────────────

    def count(self) -> int:
        return len(self._people)

    def at(self, index: int) -> Person | None:
        if not 0 <= index < len(self._people):
            return None
        return self._people[index]

    @property
    def people(self) -> list[Person]:
        return list(self._people)

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(list(self._people))
