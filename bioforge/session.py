"""Lab session: the UI state that ties editor, synthesis, archive and viewer together."""

import logging
import random

from .archive import ArchiveStore
from .core.models import CreationRequest, SpecimenProfile
from .editor import SUPPORTED_LOCALES, TraitEditor
from .errors import SynthesisBusyError, SynthesisError
from .storage import LOCALE_KEY, KeyValueStore
from .synthesis import SynthesisOrchestrator
from .viewer import SpecimenViewer


logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

SYNTHESIS_ERROR_MESSAGES = {
    "en": "Synthesis failed. The genetic sequence collapsed. Please try again.",
    "id": "Sintesis gagal. Urutan genetik runtuh. Silakan coba lagi.",
}


class LabSession:
    """State a front end holds while the user works.

    The active specimen is whatever the viewer shows; it is always a record
    in the archive or None. Only one synthesis may be pending at a time.

    Args:
        storage: Durable store for the archive and the locale.
        rng: Random source handed to the trait editor.
    """

    def __init__(self, storage: KeyValueStore, rng: random.Random | None = None) -> None:
        self.storage = storage
        self.archive = ArchiveStore(storage)
        self.archive.load()
        self.locale = self._load_locale()
        self.editor = TraitEditor(locale=self.locale, rng=rng)
        self.viewer = SpecimenViewer()
        self.orchestrator = SynthesisOrchestrator(self.archive)
        self.is_synthesizing = False
        self.error: str | None = None

    def _load_locale(self) -> str:
        try:
            saved = self.storage.get(LOCALE_KEY)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load locale, using default: {e}")
            return DEFAULT_LOCALE
        if saved in SUPPORTED_LOCALES:
            return saved
        return DEFAULT_LOCALE

    @property
    def active(self) -> SpecimenProfile | None:
        return self.viewer.current

    def set_locale(self, locale: str) -> None:
        """Switch display and generation language and remember it."""
        if locale not in SUPPORTED_LOCALES:
            raise ValueError(
                f"Unsupported locale '{locale}'. Choose one of: {', '.join(SUPPORTED_LOCALES)}"
            )
        self.storage.set(LOCALE_KEY, locale)
        self.locale = locale
        self.editor.locale = locale

    def toggle_locale(self) -> str:
        self.set_locale("id" if self.locale == "en" else "en")
        return self.locale

    async def synthesize(self, request: CreationRequest) -> SpecimenProfile | None:
        """Run one synthesis and display the result.

        Returns:
            The new specimen, or None on failure (``error`` then holds the
            message to show).

        Raises:
            SynthesisBusyError: If another synthesis is still pending.
        """
        if self.is_synthesizing:
            raise SynthesisBusyError("A synthesis is already in progress")

        self.is_synthesizing = True
        self.error = None
        try:
            specimen = await self.orchestrator.synthesize(request, self.locale)
        except SynthesisError:
            self.error = SYNTHESIS_ERROR_MESSAGES[self.locale]
            return None
        finally:
            self.is_synthesizing = False

        self.viewer.show(specimen)
        return specimen

    async def submit(self) -> SpecimenProfile | None:
        """Submit the editor's current state. No-op when the concept is blank."""
        request = self.editor.submit()
        if request is None:
            return None
        return await self.synthesize(request)

    def view(self, specimen_id: str) -> SpecimenProfile | None:
        specimen = self.archive.get(specimen_id)
        if specimen is not None:
            self.viewer.show(specimen)
        return specimen

    def close_viewer(self) -> None:
        self.viewer.close()

    def remove(self, specimen_id: str) -> bool:
        """Delete a specimen; closes the viewer if it was on display."""
        removed = self.archive.remove(specimen_id)
        if removed and self.active is not None and self.active.id == specimen_id:
            self.viewer.close()
        return removed
