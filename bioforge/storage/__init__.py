"""Durable key-value storage backends.

Two keys are used by the application:
    ARCHIVE_KEY: the serialized specimen archive
    LOCALE_KEY:  the selected display language code
"""

from .kv import KeyValueStore, JsonFileStore, MemoryStore

ARCHIVE_KEY = "bioforge_archive"
LOCALE_KEY = "bioforge_lang"

__all__ = [
    "KeyValueStore",
    "JsonFileStore",
    "MemoryStore",
    "ARCHIVE_KEY",
    "LOCALE_KEY",
]
