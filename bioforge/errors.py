"""Exception hierarchy for BioForge."""


class BioforgeError(Exception):
    """Base class for all BioForge errors."""


class ProviderError(BioforgeError):
    """An LLM provider call failed or returned an unusable response."""


class ProviderCapabilityError(ProviderError):
    """The configured provider cannot perform the requested kind of call."""


class ResponseValidationError(ProviderError):
    """A provider response did not match the expected schema.

    Args:
        message: Human readable summary.
        missing: Names of required fields that were absent or blank.
    """

    def __init__(self, message: str, missing: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing = missing or []


class SynthesisError(BioforgeError):
    """Specimen synthesis failed. The underlying cause is chained."""


class SynthesisBusyError(BioforgeError):
    """A synthesis is already in flight for this session."""
