"""Persistence: settings blob codec, key-value store, image files."""
