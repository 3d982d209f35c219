"""Synthesis orchestrator: request in, archived specimen out."""

import logging

from ..archive import ArchiveStore
from ..core.models import CreationRequest, SpecimenProfile
from ..errors import SynthesisError
from .generator import generate_specimen_data, generate_specimen_image


logger = logging.getLogger(__name__)


class SynthesisOrchestrator:
    """Runs the two generation steps and archives the result.

    Pipeline:
        Step 1: generate_specimen_data() - structured biology text
        Step 2: generate_specimen_image() - one illustrative image
        Step 3: SpecimenProfile.assemble() - fresh id and timestamp
        Step 4: archive.insert() - prepend and persist

    Either generation step failing aborts the whole run: nothing is
    assembled or archived and a single ``SynthesisError`` is raised with the
    original exception chained as its cause. A failed archive write is
    reported the same way and leaves the archive unchanged.

    Args:
        archive: Store that receives successfully synthesized specimens.
    """

    def __init__(self, archive: ArchiveStore) -> None:
        self.archive = archive

    async def synthesize(self, request: CreationRequest, locale: str = "en") -> SpecimenProfile:
        logger.info(
            f"Synthesizing {request.category.value} specimen: {request.base_idea!r} "
            f"(locale={locale})"
        )
        try:
            profile = await generate_specimen_data(request, locale)
            logger.info(f"Profile generated: {profile.name} ({profile.scientific_name})")
            image_url = await generate_specimen_image(profile, request)
        except Exception as e:
            logger.exception(f"Synthesis failed: {e}")
            raise SynthesisError("Specimen synthesis failed") from e

        specimen = SpecimenProfile.assemble(profile, request.category, image_url)
        try:
            self.archive.insert(specimen)
        except Exception as e:
            logger.exception(f"Archiving specimen {specimen.id} failed: {e}")
            raise SynthesisError("Specimen could not be archived") from e
        return specimen
