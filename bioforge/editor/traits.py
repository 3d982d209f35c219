"""Trait editor: the editable state behind the synthesis form."""

import logging
import random
from typing import Any, Callable

from ..core.models import CreationRequest, GeneticTraits, SpecimenCategory, SpecimenSize
from .pools import (
    BEHAVIORS,
    COLORS,
    DEFAULT_TRAITS,
    HABITATS,
    RANDOM_STABILITY_RANGE,
    SIZES,
    SUPPORTED_LOCALES,
    concepts_for,
)


logger = logging.getLogger(__name__)

TRAIT_NAMES = tuple(GeneticTraits.model_fields)


def parse_category(value: SpecimenCategory | str) -> SpecimenCategory:
    """Accept an enum member, its value ("Plant") or its name ("plant")."""
    if isinstance(value, SpecimenCategory):
        return value
    for category in SpecimenCategory:
        if value.strip().lower() in (category.value.lower(), category.name.lower()):
            return category
    raise ValueError(
        f"Unknown category '{value}'. Choose one of: "
        + ", ".join(c.value for c in SpecimenCategory)
    )


def parse_size(value: SpecimenSize | str) -> SpecimenSize:
    if isinstance(value, SpecimenSize):
        return value
    for size in SpecimenSize:
        if value.strip().lower() == size.value.lower():
            return size
    raise ValueError(
        f"Unknown size '{value}'. Choose one of: " + ", ".join(s.value for s in SpecimenSize)
    )


class TraitEditor:
    """Collects category, concept and traits for one synthesis request.

    Field setters only check that values fall inside their domains; the
    concept text is checked at ``submit`` time.

    Args:
        locale: Language of the defaults and the curated random pools.
        rng: Random source for ``randomize``; inject a seeded one in tests.
    """

    def __init__(self, locale: str = "en", rng: random.Random | None = None) -> None:
        if locale not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale: {locale}")
        self.locale = locale
        self._rng = rng or random.Random()
        self.category = SpecimenCategory.ANIMAL
        self.base_idea = ""
        self.traits = GeneticTraits(
            size=SpecimenSize.MEDIUM,
            stability=85,
            **DEFAULT_TRAITS[locale],
        )

    def set_category(self, category: SpecimenCategory | str) -> None:
        self.category = parse_category(category)

    def set_base_idea(self, text: str) -> None:
        self.base_idea = text

    def set_trait(self, name: str, value: Any) -> None:
        """Update one trait.

        Raises:
            ValueError: Unknown trait name, or a value outside the trait's domain.
        """
        if name not in TRAIT_NAMES:
            raise ValueError(
                f"Unknown trait '{name}'. Choose one of: {', '.join(TRAIT_NAMES)}"
            )
        if name == "size":
            value = parse_size(value)
        # model_validate enforces the stability range and types
        self.traits = GeneticTraits.model_validate(
            {**self.traits.model_dump(), name: value}
        )

    def randomize(self) -> None:
        """Fill every field from the curated pools for the editor's locale."""
        rng = self._rng
        self.category = rng.choice(list(SpecimenCategory))
        self.base_idea = rng.choice(concepts_for(self.category, self.locale))
        self.traits = GeneticTraits(
            habitat=rng.choice(HABITATS[self.locale]),
            behavior=rng.choice(BEHAVIORS[self.locale]),
            primary_color=rng.choice(COLORS[self.locale]),
            size=rng.choice(SIZES),
            stability=rng.randint(*RANDOM_STABILITY_RANGE),
        )
        logger.debug(f"Randomized editor: {self.category.value} / {self.base_idea}")

    def submit(
        self, on_submit: Callable[[CreationRequest], Any] | None = None
    ) -> CreationRequest | None:
        """Build the request and hand it to ``on_submit`` once.

        Returns:
            The request, or None when the concept text is empty or blank.
        """
        if not self.base_idea.strip():
            return None
        request = CreationRequest(
            category=self.category,
            base_idea=self.base_idea,
            traits=self.traits.model_copy(),
        )
        if on_submit is not None:
            on_submit(request)
        return request
