"""Prompt builders and response schema for specimen synthesis."""

from ..core.models import CreationRequest, GeneratedProfile

LANGUAGE_NAMES = {
    "en": "English",
    "id": "Indonesian",
}

# JSON Schema for the specimen profile response
SPECIMEN_PROFILE_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "description": "Common name of the species",
        },
        "scientific_name": {
            "type": "string",
            "description": "Binomial scientific name",
        },
        "description": {
            "type": "string",
            "description": "Biological profile: anatomy, appearance, notable features",
        },
        "taxonomy": {
            "type": "string",
            "description": "Classification path, e.g. Kingdom > Phylum > Class > Order > Family",
        },
        "unique_abilities": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Distinctive abilities or adaptations",
        },
        "habitat_detail": {
            "type": "string",
            "description": "Where and how the species lives",
        },
        "diet": {"type": "string"},
        "lifespan": {"type": "string"},
    },
    "required": list(GeneratedProfile.model_fields),
    "additionalProperties": False,
}


def language_name(locale: str) -> str:
    return LANGUAGE_NAMES.get(locale, "English")


def build_profile_prompt(request: CreationRequest, locale: str) -> str:
    """Prompt for the biological text of a new species."""
    traits = request.traits
    language = language_name(locale)
    return f"""Act as a senior xenobiologist. Create a detailed biological profile for a new {request.category.value} species based on the following concept: "{request.base_idea}".

Specific traits provided:
- Size: {traits.size.value}
- Color: {traits.primary_color}
- Habitat: {traits.habitat}
- Behavior: {traits.behavior}
- Genetic stability: {traits.stability}/100

IMPORTANT: All text fields (name, scientific_name, description, taxonomy, unique_abilities, habitat_detail, diet, lifespan) MUST be in {language}.
Provide realistic or fascinating biological details. Every field is required and must not be empty."""


def build_image_prompt(profile: GeneratedProfile, request: CreationRequest) -> str:
    """Prompt for the photographic illustration of a generated species."""
    traits = request.traits
    return (
        f"A hyper-realistic, high-fidelity biological photograph of a new "
        f"{request.category.value} species named {profile.name}.\n"
        f"Description: {profile.description}\n"
        f"Visual features: {traits.primary_color} textures and body, {traits.size.value} scale, "
        f"captured in its natural environment of {profile.habitat_detail}.\n"
        "Style: award-winning wildlife photography. Photorealistic, incredible detail, "
        "macro lens, realistic skin/leaf/shell textures, cinematic natural lighting, "
        "shallow depth of field, sharp focus, real-world physics. "
        "Avoid any digital painting or conceptual art looks."
    )
