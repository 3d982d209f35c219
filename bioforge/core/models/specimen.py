"""Specimen models: traits, creation requests, generated profiles and records."""

import time
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SpecimenCategory(str, Enum):
    """Broad kind of organism to synthesize."""

    ANIMAL = "Animal"
    PLANT = "Plant"
    FANTASY = "Fantasy"
    MICROBE = "Microbe"
    HYBRID = "Hybrid"


class SpecimenSize(str, Enum):
    """Physical scale of a specimen."""

    MICROSCOPIC = "Microscopic"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    COLOSSAL = "Colossal"


class GeneticTraits(BaseModel):
    """Named traits the user can edit before synthesis."""

    habitat: str = Field(description="Environment the organism lives in")
    behavior: str = Field(description="Dominant behavioral pattern")
    primary_color: str = Field(description="Main pigmentation")
    size: SpecimenSize = Field(default=SpecimenSize.MEDIUM)
    stability: int = Field(
        default=85,
        ge=1,
        le=100,
        description="Narrative genetic stability, passed through to generation",
    )


class CreationRequest(BaseModel):
    """A complete, validated request to synthesize one specimen. Never persisted."""

    category: SpecimenCategory
    base_idea: str
    traits: GeneticTraits

    @field_validator("base_idea")
    @classmethod
    def _base_idea_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("base_idea must not be empty")
        return value


class GeneratedProfile(BaseModel):
    """Biological text fields returned by the text-generation model.

    Every field is required and must be non-blank; extra keys are ignored.
    """

    model_config = ConfigDict(str_strip_whitespace=True, str_min_length=1)

    name: str
    scientific_name: str
    description: str
    taxonomy: str
    unique_abilities: list[str] = Field(min_length=1)
    habitat_detail: str
    diet: str
    lifespan: str


def new_specimen_id() -> str:
    """Generate a fresh unique specimen identifier."""
    return uuid4().hex


def now_millis() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


class SpecimenProfile(BaseModel):
    """A synthesized specimen as stored in the archive. Immutable."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_specimen_id)
    name: str
    scientific_name: str
    category: SpecimenCategory
    description: str
    taxonomy: str
    unique_abilities: tuple[str, ...]
    habitat_detail: str
    diet: str
    lifespan: str
    image_url: str = Field(description="data: URI or remote URL of the specimen image")
    timestamp: int = Field(
        default_factory=now_millis,
        description="Creation instant in epoch milliseconds",
    )

    @classmethod
    def assemble(
        cls,
        profile: GeneratedProfile,
        category: SpecimenCategory,
        image_url: str,
    ) -> "SpecimenProfile":
        """Combine generated text, the request category and the image into a record."""
        return cls(
            id=new_specimen_id(),
            category=category,
            image_url=image_url,
            timestamp=now_millis(),
            **profile.model_dump(),
        )
