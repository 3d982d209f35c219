"""Global fixtures for BioForge tests."""

from unittest.mock import AsyncMock, patch

import pytest

from bioforge.config import set_config
from bioforge.core import llm
from bioforge.core.models import (
    CreationRequest,
    GeneticTraits,
    SpecimenCategory,
    SpecimenProfile,
    SpecimenSize,
)
from bioforge.storage import MemoryStore

IMAGE_DATA_URI = "data:image/png;base64,aGVsbG8gc3BlY2ltZW4="


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point config and data at a temp dir and reset process-wide caches."""
    monkeypatch.setenv("BIOFORGE_CONFIG", str(tmp_path / "config.json"))
    monkeypatch.setenv("BIOFORGE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("BIOFORGE_TEXT_PROVIDER", raising=False)
    monkeypatch.delenv("BIOFORGE_IMAGE_PROVIDER", raising=False)
    set_config(None)
    llm._providers.clear()
    yield tmp_path
    set_config(None)
    llm._providers.clear()


@pytest.fixture
def profile_response():
    """A complete text-generation response."""
    return {
        "name": "Voltaic Barrelcactus",
        "scientific_name": "Electrocactus liquidus",
        "description": "A ribbed cactus whose sap is a conductive electrolyte.",
        "taxonomy": "Plantae > Tracheophyta > Magnoliopsida > Caryophyllales > Cactaceae",
        "unique_abilities": ["Stores charge in its sap", "Discharges at grazers"],
        "habitat_detail": "Black glass dunes of the Obsidian Desert",
        "diet": "Photosynthesis and ambient static",
        "lifespan": "Up to 300 years",
    }


@pytest.fixture
def sample_request():
    """The cactus request from the product brief."""
    return CreationRequest(
        category=SpecimenCategory.PLANT,
        base_idea="A cactus that stores liquid electricity",
        traits=GeneticTraits(
            habitat="Obsidian Desert",
            behavior="Symbiotic",
            primary_color="Chrome Silver",
            size=SpecimenSize.MEDIUM,
            stability=70,
        ),
    )


def make_specimen(name: str, category=SpecimenCategory.ANIMAL, timestamp: int = 1_700_000_000_000) -> SpecimenProfile:
    return SpecimenProfile(
        name=name,
        scientific_name=f"{name.lower()} fictus",
        category=category,
        description=f"Description of {name}",
        taxonomy="Animalia > Chordata",
        unique_abilities=["Glows"],
        habitat_detail="Crystal Cathedral",
        diet="Moonlight",
        lifespan="12 years",
        image_url=IMAGE_DATA_URI,
        timestamp=timestamp,
    )


@pytest.fixture
def sample_specimens():
    """Three specimens, oldest first."""
    return [
        make_specimen("Glimmerwolf", timestamp=1_700_000_000_000),
        make_specimen("Sandshark", timestamp=1_700_000_100_000),
        make_specimen("Fogray", timestamp=1_700_000_200_000),
    ]


@pytest.fixture
def memory_store():
    return MemoryStore()


class FlakyStore(MemoryStore):
    """Memory store whose writes can be switched to fail like a full disk."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_writes = False

    def set(self, key, value):
        if self.fail_writes:
            raise OSError("No space left on device")
        super().set(key, value)


@pytest.fixture
def flaky_store():
    return FlakyStore()


@pytest.fixture
def mock_llm(profile_response):
    """Mock the text and image collaborator calls made by the generator."""
    with patch(
        "bioforge.synthesis.generator.simple_call_async", new_callable=AsyncMock
    ) as mock_text, patch(
        "bioforge.synthesis.generator.image_call_async", new_callable=AsyncMock
    ) as mock_image:
        mock_text.return_value = profile_response
        mock_image.return_value = [IMAGE_DATA_URI]
        yield {
            "text": mock_text,
            "image": mock_image,
        }


@pytest.fixture
def specimen_factory():
    """Build archive records by name."""
    return make_specimen
