from abc import ABC, abstractmethod

from image_prompter.entities.image import GenerationRequest


class GenerationServiceInterface(ABC):
    @abstractmethod
    async def invoke(self, request: GenerationRequest) -> str:
        """
        Send one request to the generation backend and return its text.

        Raises:
            BackendError: If the call fails or the response cannot be read.
        """
