"""View protocol: what the gallery core asks of a presentation layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gallery.person import Person


@runtime_checkable
class GalleryView(Protocol):
    """Protocol that all presentation layers must implement."""

    def reload(self) -> None:
        """Redraw from Gallery.count()/Gallery.at()."""
        ...

    def present_picker(self) -> None:
        """Show an image picker. Report the result via Gallery.on_image_picked."""
        ...

    def present_rename(self, index: int, person: "Person") -> None:
        """Prompt for a new name. Report it via Gallery.on_rename_confirmed."""
        ...
