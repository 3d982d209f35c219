"""Data models for BioForge.

This package contains all Pydantic models used across the system:
- specimen.py: Traits, creation requests, generated profiles, archive records
"""

from .specimen import (
    # Enums
    SpecimenCategory,
    SpecimenSize,
    # Editor
    GeneticTraits,
    CreationRequest,
    # Synthesis
    GeneratedProfile,
    SpecimenProfile,
    # Helpers
    new_specimen_id,
    now_millis,
)

__all__ = [
    # Enums
    "SpecimenCategory",
    "SpecimenSize",
    # Editor
    "GeneticTraits",
    "CreationRequest",
    # Synthesis
    "GeneratedProfile",
    "SpecimenProfile",
    # Helpers
    "new_specimen_id",
    "now_millis",
]
