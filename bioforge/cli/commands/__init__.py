"""CLI commands for BioForge."""

from . import (
    synthesize,
    archive,
    lang,
    config,
)

__all__ = [
    "synthesize",
    "archive",
    "lang",
    "config",
]
