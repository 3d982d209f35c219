"""Specimen archive."""

from .store import ArchiveStore

__all__ = ["ArchiveStore"]
