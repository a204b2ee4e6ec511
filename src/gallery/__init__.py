"""People gallery — an ordered list of named pictures that survives restarts.

Layout:
    ~/.gallery/
    ├── gallery.toml                   # Optional configuration
    ├── settings.json                  # Key-value settings; "people" holds the list blob
    └── Documents/
        └── 1F0C…-…                    # One JPEG per record, named by its token
"""

from gallery.config import GalleryConfig, load_config
from gallery.core import Gallery
from gallery.person import Person

__all__ = ["Gallery", "GalleryConfig", "Person", "load_config"]
