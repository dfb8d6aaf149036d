"""
Builds the backend requests for both prompt modes.

Pure data transformation: no I/O, no logging.
"""

from collections.abc import Sequence

from image_prompter.entities.errors import EmptyInputError
from image_prompter.entities.image import EncodedImage, GenerationRequest

UNIFIED_INSTRUCTION = (
    "Analyze all the following images and generate a single, unified, and "
    "detailed descriptive prompt that could be used to create a similar cohesive "
    "image or scene. Focus on the overall style, mood, color palette, subject "
    "matter, and composition."
)

PER_IMAGE_INSTRUCTION = (
    "Analyze the following image and generate a detailed descriptive prompt that "
    "could be used to recreate it. Focus on style, mood, color palette, subject "
    "matter, and composition."
)


def build_unified(images: Sequence[EncodedImage]) -> GenerationRequest:
    """
    Build the single request that asks for one prompt covering every image.

    Raises:
        EmptyInputError: If ``images`` is empty.
    """
    if not images:
        raise EmptyInputError("At least one image is required to build a request.")

    return {
        "instruction_text": UNIFIED_INSTRUCTION,
        "images": list(images),
    }


def build_per_image(image: EncodedImage) -> GenerationRequest:
    return {
        "instruction_text": PER_IMAGE_INSTRUCTION,
        "images": [image],
    }
