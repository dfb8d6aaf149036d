from abc import ABC, abstractmethod
from collections.abc import Sequence

from image_prompter.entities.image import EncodedImage, UploadedImage


class ImageEncoderInterface(ABC):
    @abstractmethod
    async def encode(self, image: UploadedImage) -> EncodedImage:
        """Read the image and return its base64 payload with the mime type."""

    @abstractmethod
    async def encode_all(self, images: Sequence[UploadedImage]) -> list[EncodedImage]:
        """Encode every image concurrently, keeping the input order."""
