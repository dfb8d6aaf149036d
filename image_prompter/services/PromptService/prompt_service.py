"""
Prompt generation pipeline.

Each run walks IDLE -> ENCODING -> DISPATCHING -> AGGREGATING -> DONE, or ends
in FAILED. Nothing is kept between runs. In unified mode all images go into a
single backend call; in separate mode one call is made per image, strictly in
input order, and the first failure aborts the remaining images.

Every failure is caught here and returned as a PromptResult, so callers of
``generate_prompts`` only ever receive a string.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from langfuse import observe

from image_prompter.entities.errors import ConfigurationError
from image_prompter.entities.image import EncodedImage, UploadedImage
from image_prompter.entities.prompt_mode import PromptMode
from image_prompter.entities.prompt_result import (
    PipelineConfig,
    PipelineState,
    PromptResult,
)
from image_prompter.services.EncoderService.image_encoder_interface import (
    ImageEncoderInterface,
)
from image_prompter.services.GenerationService.generation_service_interface import (
    GenerationServiceInterface,
)
from image_prompter.services.PromptService.prompt_service_interface import (
    PromptServiceInterface,
)
from image_prompter.services.PromptService.result_formatter import (
    EMPTY_SELECTION_NOTICE,
    SEPARATE_PROMPTS_SEPARATOR,
    format_result,
)
from image_prompter.services.RequestBuilderService.request_builder import (
    build_per_image,
    build_unified,
)

GenerationServiceFactory = Callable[[PipelineConfig], GenerationServiceInterface]


class PromptService(PromptServiceInterface):
    def __init__(
        self,
        encoder: ImageEncoderInterface,
        generation_service_factory: GenerationServiceFactory,
        config: PipelineConfig,
        logger: logging.Logger,
    ) -> None:
        """
        Args:
            encoder: Reads and base64-encodes uploaded images
            generation_service_factory: Builds the backend client for one run
            config: Default configuration used when a run does not pass its own
            logger: Logger instance
        """
        self.encoder = encoder
        self.generation_service_factory = generation_service_factory
        self.config = config
        self.logger = logger

    def _transition(self, current: PipelineState, target: PipelineState) -> PipelineState:
        self.logger.debug("Pipeline state %s -> %s", current.value, target.value)
        return target

    def _require_credential(self, config: PipelineConfig) -> None:
        if not config.api_key or not config.api_key.strip():
            raise ConfigurationError("API key is not set.")

    async def _dispatch(
        self,
        generation_service: GenerationServiceInterface,
        encoded_images: list[EncodedImage],
        mode: PromptMode,
    ) -> list[str]:
        if mode is PromptMode.UNIFIED:
            return [await generation_service.invoke(build_unified(encoded_images))]

        if mode is PromptMode.SEPARATE:
            results: list[str] = []
            for index, image in enumerate(encoded_images, start=1):
                self.logger.info(
                    "Generating prompt for image %d of %d", index, len(encoded_images)
                )
                results.append(await generation_service.invoke(build_per_image(image)))
            return results

        raise ValueError(f"Unsupported prompt mode: {mode}")

    def _aggregate(self, mode: PromptMode, results: list[str]) -> str:
        if mode is PromptMode.UNIFIED:
            return results[0]

        return SEPARATE_PROMPTS_SEPARATOR.join(
            f"Prompt for Image {index}:\n{text}"
            for index, text in enumerate(results, start=1)
        )

    async def run(
        self,
        images: Sequence[UploadedImage],
        mode: PromptMode,
        config: PipelineConfig | None = None,
    ) -> PromptResult:
        config = config or self.config
        state = PipelineState.IDLE

        try:
            mode = PromptMode(mode)
            self._require_credential(config)

            if not images:
                self._transition(state, PipelineState.FAILED)
                return PromptResult.success(EMPTY_SELECTION_NOTICE)

            state = self._transition(state, PipelineState.ENCODING)
            encoded_images = await self.encoder.encode_all(images)

            state = self._transition(state, PipelineState.DISPATCHING)
            generation_service = self.generation_service_factory(config)
            results = await self._dispatch(generation_service, encoded_images, mode)

            state = self._transition(state, PipelineState.AGGREGATING)
            text = self._aggregate(mode, results)

            self._transition(state, PipelineState.DONE)
            return PromptResult.success(text)

        except Exception as e:
            self.logger.error(
                "Error generating prompts (state %s): %s", state.value, e, exc_info=True
            )
            self._transition(state, PipelineState.FAILED)
            return PromptResult.failure(e)

    @observe()
    async def generate_prompts(
        self,
        images: Sequence[UploadedImage],
        mode: PromptMode,
        config: PipelineConfig | None = None,
    ) -> str:
        result = await self.run(images, mode, config)
        return format_result(result)
