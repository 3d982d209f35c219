"""Trait editor and its curated randomization pools."""

from .pools import SUPPORTED_LOCALES, concepts_for
from .traits import TRAIT_NAMES, TraitEditor, parse_category, parse_size

__all__ = [
    "SUPPORTED_LOCALES",
    "TRAIT_NAMES",
    "TraitEditor",
    "concepts_for",
    "parse_category",
    "parse_size",
]
