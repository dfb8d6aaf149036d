from dataclasses import dataclass
from pathlib import Path
from typing import TypedDict


@dataclass(frozen=True)
class UploadedImage:
    """Image selected by the caller.

    ``source`` holds the raw bytes or a path to read them from. ``display_handle``
    belongs to the caller (previews) and is never read by the pipeline.
    """

    source: bytes | str | Path
    mime_type: str
    display_handle: str | None = None


class EncodedImage(TypedDict):
    """Binary image payload encoded as base64."""

    data: str
    mime_type: str


class GenerationRequest(TypedDict):
    """Instruction text plus the images sent in one backend call."""

    instruction_text: str
    images: list[EncodedImage]
