from __future__ import annotations

import asyncio
import base64
import logging
from collections.abc import Sequence
from pathlib import Path

from image_prompter.entities.errors import ReadError
from image_prompter.entities.image import EncodedImage, UploadedImage
from image_prompter.services.EncoderService.image_encoder_interface import (
    ImageEncoderInterface,
)


class ImageEncoder(ImageEncoderInterface):
    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    async def _read_bytes(self, image: UploadedImage) -> bytes:
        source = image.source
        if isinstance(source, (bytes, bytearray, memoryview)):
            return bytes(source)

        if isinstance(source, (str, Path)):
            try:
                return await asyncio.to_thread(Path(source).read_bytes)
            except OSError as e:
                raise ReadError(f"Failed to read image file {source}: {e}") from e

        raise ReadError(
            f"Unsupported image source of type {type(source).__name__}"
        )

    async def encode(self, image: UploadedImage) -> EncodedImage:
        raw_bytes = await self._read_bytes(image)
        encoded: EncodedImage = {
            "data": base64.b64encode(raw_bytes).decode("ascii"),
            "mime_type": image.mime_type,
        }
        self.logger.debug(
            "Encoded image (%s, %d bytes)", image.mime_type, len(raw_bytes)
        )
        return encoded

    async def encode_all(self, images: Sequence[UploadedImage]) -> list[EncodedImage]:
        # the first failure cancels the sibling reads; results keep input order
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(self.encode(image)) for image in images]
        except ExceptionGroup as group_error:
            raise group_error.exceptions[0]

        return [task.result() for task in tasks]
