"""Specimen synthesis pipeline.

Pipeline:
    Step 1: generate_specimen_data() - Text collaborator, strict schema check
    Step 2: generate_specimen_image() - Image collaborator, one image kept
    Step 3: SynthesisOrchestrator.synthesize() - Assemble and archive
"""

from .generator import (
    generate_specimen_data,
    generate_specimen_image,
    parse_profile_response,
    select_image,
)
from .orchestrator import SynthesisOrchestrator

__all__ = [
    "generate_specimen_data",
    "generate_specimen_image",
    "parse_profile_response",
    "select_image",
    "SynthesisOrchestrator",
]
