"""The Person record shown in the gallery."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class Person:
    """A named picture. `image` is the token naming the file on disk."""

    name: str
    image: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "image": self.image}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Person:
        """Build a Person, substituting "" for any missing or non-text field."""
        name = data.get("name")
        image = data.get("image")
        return cls(
            name=name if isinstance(name, str) else "",
            image=image if isinstance(image, str) else "",
        )

    def renamed(self, new_name: str) -> Person:
        return replace(self, name=new_name)
