"""Person list <-> settings blob.

The blob is a UTF-8 JSON document::

    {"version": 1, "people": [{"name": "...", "image": "..."}, ...]}

Decoding never raises: an absent blob is a first run and anything that does
not have this shape is treated as no data.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable

from gallery.person import Person

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def encode_people(people: Iterable[Person]) -> bytes:
    """Serialize the full ordered list."""
    doc = {
        "version": FORMAT_VERSION,
        "people": [p.to_dict() for p in people],
    }
    return json.dumps(doc, separators=(",", ":")).encode("utf-8")


def decode_people(blob: bytes | None) -> list[Person]:
    """Deserialize a blob produced by encode_people; [] when absent or unusable."""
    if not blob:
        return []
    if not isinstance(blob, (bytes, bytearray)):
        logger.warning("Discarding people blob of type %s", type(blob).__name__)
        return []

    try:
        doc = json.loads(blob.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        logger.warning("Discarding unreadable people blob (%d bytes): %s", len(blob), e)
        return []

    if not isinstance(doc, dict):
        logger.warning("Discarding people blob: expected object, got %s", type(doc).__name__)
        return []

    version = doc.get("version")
    if version != FORMAT_VERSION:
        logger.warning("Discarding people blob with unsupported version %r", version)
        return []

    entries = doc.get("people")
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        logger.warning("Discarding people blob: 'people' is not a list of records")
        return []

    return [Person.from_dict(e) for e in entries]
