"""Image files in the gallery's private directory, one per record.

Picked images are re-encoded as JPEG and written under a freshly generated
token; records keep only the token and the bytes are read back on demand.
"""

from __future__ import annotations

import io
import logging
import uuid
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

logger = logging.getLogger(__name__)

DEFAULT_QUALITY = 0.8


class ImageStore:
    """Read/write access to token-named image files."""

    def __init__(self, directory: Path, quality: float = DEFAULT_QUALITY) -> None:
        if not 0.0 <= quality <= 1.0:
            raise ValueError(f"quality must be between 0 and 1, got {quality}")
        self.directory = directory
        self.quality = quality

    @staticmethod
    def new_token() -> str:
        return str(uuid.uuid4()).upper()

    def path_for(self, token: str) -> Path | None:
        """File path for token, or None if token is not a bare file name."""
        if not token or token in (".", "..") or "\x00" in token or "\\" in token:
            return None
        if Path(token).name != token:
            return None
        return self.directory / token

    def encode(self, data: bytes) -> bytes | None:
        """Re-encode raw image bytes as JPEG at the configured quality."""
        try:
            with Image.open(io.BytesIO(data)) as image:
                image = ImageOps.exif_transpose(image)
                image = image.convert("RGB")
                buffer = io.BytesIO()
                image.save(buffer, format="JPEG", quality=round(self.quality * 100))
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            logger.warning("Could not encode picked image (%d bytes): %s", len(data), e)
            return None
        return buffer.getvalue()

    def write(self, token: str, data: bytes) -> bool:
        """Encode data and store it under token. False on any failure."""
        path = self.path_for(token)
        if path is None:
            logger.warning("Refusing to write image under invalid token %r", token)
            return False

        payload = self.encode(data)
        if payload is None:
            return False

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_bytes(payload)
        except OSError as e:
            logger.warning("Could not write image %s: %s", path, e)
            return False

        logger.debug("Wrote image %s (%d bytes)", token, len(payload))
        return True

    def read(self, token: str) -> bytes | None:
        """Stored bytes for token, or None if missing or unreadable."""
        path = self.path_for(token)
        if path is None:
            return None
        try:
            return path.read_bytes()
        except OSError as e:
            logger.debug("Could not read image %s: %s", path, e)
            return None

    def open(self, token: str) -> Image.Image | None:
        """Decoded image for display, or None."""
        data = self.read(token)
        if data is None:
            return None
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            logger.warning("Could not decode image %s: %s", token, e)
            return None
        return image
