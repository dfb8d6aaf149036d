"""
GenerationService backed by the Google Gen AI SDK.

One instance is created per pipeline run from the resolved API key. Each
``invoke`` is a single non-streamed ``generate_content`` call; there are no
retries and no timeout beyond the SDK transport's own.
"""

from __future__ import annotations

import base64
import logging

from google import genai
from google.genai import types
from langfuse import observe

from image_prompter.entities.errors import BackendError
from image_prompter.entities.image import GenerationRequest
from image_prompter.services.GenerationService.generation_service_interface import (
    GenerationServiceInterface,
)


class GeminiGenerationService(GenerationServiceInterface):
    def __init__(
        self,
        api_key: str,
        model_name: str,
        logger: logging.Logger,
    ) -> None:
        self.model_name = model_name
        self.logger = logger
        self.client = genai.Client(api_key=api_key)

    def _build_parts(self, request: GenerationRequest) -> list[types.Part]:
        parts = [types.Part.from_text(text=request["instruction_text"])]
        for image in request["images"]:
            parts.append(
                types.Part.from_bytes(
                    data=base64.b64decode(image["data"]),
                    mime_type=image["mime_type"],
                )
            )
        return parts

    @observe()
    async def invoke(self, request: GenerationRequest) -> str:
        self.logger.info(
            "Requesting prompt from %s with %d image(s)",
            self.model_name,
            len(request["images"]),
        )

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=self._build_parts(request),
            )
            text = response.text
        except Exception as e:
            self.logger.error("Generation call failed: %s", e)
            raise BackendError(str(e)) from e

        if not text:
            self.logger.warning("Generation backend returned empty text")
            return ""

        return text
