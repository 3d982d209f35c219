"""Tests for the synthesis orchestrator."""

import asyncio

import pytest

from bioforge.archive import ArchiveStore
from bioforge.core.models import SpecimenCategory
from bioforge.errors import ResponseValidationError, SynthesisError
from bioforge.storage import ARCHIVE_KEY
from bioforge.synthesis import SynthesisOrchestrator


@pytest.fixture
def archive(memory_store, sample_specimens):
    store = ArchiveStore(memory_store)
    for specimen in sample_specimens:
        store.insert(specimen)
    return store


class TestSynthesize:
    """Tests for the full pipeline."""

    def test_success_prepends_one_record(self, mock_llm, archive, sample_request):
        before = archive.specimens
        orchestrator = SynthesisOrchestrator(archive)

        specimen = asyncio.run(orchestrator.synthesize(sample_request, "en"))

        assert len(archive) == len(before) + 1
        assert archive.specimens[0] is specimen
        assert archive.specimens[1:] == before
        assert specimen.category == SpecimenCategory.PLANT
        assert specimen.name == "Voltaic Barrelcactus"
        assert specimen.image_url.startswith("data:image/png;base64,")

    def test_locale_passed_to_prompt(self, mock_llm, archive, sample_request):
        asyncio.run(SynthesisOrchestrator(archive).synthesize(sample_request, "id"))
        assert "Indonesian" in mock_llm["text"].call_args.kwargs["prompt"]

    @pytest.mark.parametrize("field", ["name", "unique_abilities", "lifespan"])
    def test_missing_field_leaves_archive_unchanged(
        self, mock_llm, archive, memory_store, sample_request, profile_response, field
    ):
        del profile_response[field]
        mock_llm["text"].return_value = profile_response
        before = archive.specimens
        stored_before = memory_store.raw(ARCHIVE_KEY)

        with pytest.raises(SynthesisError) as exc_info:
            asyncio.run(SynthesisOrchestrator(archive).synthesize(sample_request))

        assert isinstance(exc_info.value.__cause__, ResponseValidationError)
        assert archive.specimens == before
        assert memory_store.raw(ARCHIVE_KEY) == stored_before
        mock_llm["image"].assert_not_called()

    def test_no_image_leaves_archive_unchanged(self, mock_llm, archive, sample_request):
        mock_llm["image"].return_value = []
        before = archive.specimens

        with pytest.raises(SynthesisError):
            asyncio.run(SynthesisOrchestrator(archive).synthesize(sample_request))

        assert archive.specimens == before

    def test_network_error_wrapped(self, mock_llm, archive, sample_request):
        mock_llm["text"].side_effect = ConnectionError("unreachable")
        before = archive.specimens

        with pytest.raises(SynthesisError) as exc_info:
            asyncio.run(SynthesisOrchestrator(archive).synthesize(sample_request))

        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert archive.specimens == before

    def test_archive_write_failure_wrapped(self, mock_llm, flaky_store, sample_request):
        archive = ArchiveStore(flaky_store)
        flaky_store.fail_writes = True

        with pytest.raises(SynthesisError) as exc_info:
            asyncio.run(SynthesisOrchestrator(archive).synthesize(sample_request))

        assert isinstance(exc_info.value.__cause__, OSError)
        assert len(archive) == 0
        assert flaky_store.get(ARCHIVE_KEY) is None

    def test_create_then_delete_restores_archive(self, mock_llm, archive, sample_request):
        before = archive.specimens

        specimen = asyncio.run(SynthesisOrchestrator(archive).synthesize(sample_request))
        archive.remove(specimen.id)

        assert archive.specimens == before
