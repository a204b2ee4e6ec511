"""Configuration loading from environment variables and gallery.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_DEFAULT_DATA_DIR = Path.home() / ".gallery"
_CONFIG_FILENAME = "gallery.toml"


@dataclass
class StorageConfig:
    """Where the record list is persisted."""

    settings_file: Path = _DEFAULT_DATA_DIR / "settings.json"
    people_key: str = "people"


@dataclass
class ImageConfig:
    """Image file storage."""

    directory: Path = _DEFAULT_DATA_DIR / "Documents"
    quality: float = 0.8


@dataclass
class GalleryConfig:
    """Top-level gallery configuration."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    images: ImageConfig = field(default_factory=ImageConfig)
    data_dir: Path = _DEFAULT_DATA_DIR
    default_name: str = "Unknown"

    @classmethod
    def for_directory(cls, data_dir: Path) -> GalleryConfig:
        """Defaults with every path rooted at data_dir."""
        return cls(
            storage=StorageConfig(settings_file=data_dir / "settings.json"),
            images=ImageConfig(directory=data_dir / "Documents"),
            data_dir=data_dir,
        )


def load_config(config_path: Path | None = None) -> GalleryConfig:
    """Load configuration from environment variables and optional gallery.toml.

    Priority: environment variables > gallery.toml > defaults.
    """
    env_data_dir = os.getenv("GALLERY_DATA_DIR")

    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir, then the data dir (~/.gallery/ unless overridden)
        home_dir = Path(env_data_dir).expanduser() if env_data_dir else _DEFAULT_DATA_DIR
        for candidate in [Path.cwd() / _CONFIG_FILENAME, home_dir / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    storage_data = file_data.get("storage", {})
    images_data = file_data.get("images", {})

    data_dir = Path(env_data_dir or file_data.get("data_dir", str(_DEFAULT_DATA_DIR)))
    data_dir = data_dir.expanduser()

    config = GalleryConfig(
        storage=StorageConfig(
            settings_file=Path(
                os.getenv(
                    "GALLERY_SETTINGS_FILE",
                    storage_data.get("settings_file", str(data_dir / "settings.json")),
                )
            ).expanduser(),
            people_key=storage_data.get("people_key", "people"),
        ),
        images=ImageConfig(
            directory=Path(
                os.getenv("GALLERY_IMAGE_DIR", images_data.get("directory", str(data_dir / "Documents")))
            ).expanduser(),
            quality=float(os.getenv("GALLERY_IMAGE_QUALITY", images_data.get("quality", 0.8))),
        ),
        data_dir=data_dir,
        default_name=file_data.get("default_name", "Unknown"),
    )
    return config
