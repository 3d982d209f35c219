"""Calls to the text and image collaborators for one specimen."""

import logging

from pydantic import ValidationError

from ..core.llm import image_call_async, simple_call_async
from ..core.models import CreationRequest, GeneratedProfile
from ..errors import ResponseValidationError
from .prompts import SPECIMEN_PROFILE_SCHEMA, build_image_prompt, build_profile_prompt


logger = logging.getLogger(__name__)


def _missing_fields(error: ValidationError) -> list[str]:
    """Top-level field names that failed validation, in schema order."""
    failed = {str(e["loc"][0]) for e in error.errors() if e["loc"]}
    return [name for name in GeneratedProfile.model_fields if name in failed]


def parse_profile_response(data: dict) -> GeneratedProfile:
    """Validate the text collaborator's response.

    Raises:
        ResponseValidationError: If any required field is missing, blank or
            of the wrong type.
    """
    if not isinstance(data, dict):
        raise ResponseValidationError(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    try:
        return GeneratedProfile.model_validate(data)
    except ValidationError as e:
        missing = _missing_fields(e)
        raise ResponseValidationError(
            f"Specimen profile response is invalid: {', '.join(missing) or 'unknown fields'}",
            missing=missing,
        ) from e


async def generate_specimen_data(request: CreationRequest, locale: str) -> GeneratedProfile:
    """Generate and validate the biological text for a request."""
    prompt = build_profile_prompt(request, locale)
    response = await simple_call_async(
        prompt=prompt,
        response_schema=SPECIMEN_PROFILE_SCHEMA,
        schema_name="specimen_profile",
    )
    return parse_profile_response(response)


def select_image(payloads: list[str]) -> str:
    """Pick the image to keep from a collaborator response.

    Raises:
        ResponseValidationError: If there are no image payloads.
    """
    images = [p for p in payloads or [] if p]
    if not images:
        raise ResponseValidationError("Image response contained no image data")
    if len(images) > 1:
        logger.warning(f"Image response contained {len(images)} images; keeping the first")

    image = images[0]
    if image.startswith(("data:", "http://", "https://")):
        return image
    # Bare base64 payload
    return f"data:image/png;base64,{image}"


async def generate_specimen_image(
    profile: GeneratedProfile, request: CreationRequest
) -> str:
    """Generate one image for a generated profile. Returns a data URI or URL."""
    prompt = build_image_prompt(profile, request)
    payloads = await image_call_async(prompt=prompt)
    return select_image(payloads)
