"""Gallery core — the boundary between the record store and a UI.

Responsibilities:
1. Load the persisted people list at start
2. Expose count()/at() and image reads to views
3. Handle UI events: add requested, image picked, item selected, rename confirmed
4. Save the full list after every mutation, then ask views to reload

Everything runs synchronously on the caller's thread.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gallery.config import GalleryConfig
from gallery.person import Person
from gallery.storage.images import ImageStore
from gallery.storage.settings import SettingsStore
from gallery.store import PersonStore

if TYPE_CHECKING:
    from PIL import Image

    from gallery.views.base import GalleryView

logger = logging.getLogger(__name__)


class Gallery:
    """Routes view events to the person and image stores."""

    def __init__(self, config: GalleryConfig) -> None:
        self.config = config
        self.settings = SettingsStore(config.storage.settings_file)
        self.images = ImageStore(config.images.directory, config.images.quality)
        self.people = PersonStore(self.settings, config.storage.people_key)
        self._views: list[GalleryView] = []
        self.people.load()

    # ── View management ──────────────────────────────────────

    def add_view(self, view: GalleryView) -> None:
        self._views.append(view)
        logger.info("Registered view: %s", type(view).__name__)

    def _reload_views(self) -> None:
        for view in self._views:
            view.reload()

    # ── Read access for views ────────────────────────────────

    def count(self) -> int:
        return self.people.count()

    def at(self, index: int) -> Person | None:
        return self.people.at(index)

    def image_bytes(self, index: int) -> bytes | None:
        person = self.people.at(index)
        if person is None:
            return None
        return self.images.read(person.image)

    def image(self, index: int) -> Image.Image | None:
        person = self.people.at(index)
        if person is None:
            return None
        return self.images.open(person.image)

    # ── Events ───────────────────────────────────────────────

    def on_add_requested(self) -> None:
        for view in self._views:
            view.present_picker()

    def on_image_picked(self, data: bytes) -> Person:
        """Import a picked image as a new record with the default name."""
        token = self.images.new_token()
        if not self.images.write(token, data):
            logger.warning("Image %s not stored; record added without a file", token)

        person = Person(name=self.config.default_name, image=token)
        self.people.append(person)
        self.people.save()
        self._reload_views()
        return person

    def on_item_selected(self, index: int) -> Person | None:
        person = self.people.at(index)
        if person is None:
            logger.debug("Ignoring selection of index %d (count=%d)", index, self.count())
            return None
        for view in self._views:
            view.present_rename(index, person)
        return person

    def on_rename_confirmed(self, index: int, new_name: str | None) -> bool:
        if not self.people.rename(index, new_name):
            logger.debug("Rename of index %d ignored", index)
            return False
        self.people.save()
        self._reload_views()
        return True
