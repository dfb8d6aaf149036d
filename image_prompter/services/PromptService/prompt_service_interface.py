from abc import ABC, abstractmethod
from collections.abc import Sequence

from image_prompter.entities.image import UploadedImage
from image_prompter.entities.prompt_mode import PromptMode
from image_prompter.entities.prompt_result import PipelineConfig, PromptResult


class PromptServiceInterface(ABC):
    @abstractmethod
    async def run(
        self,
        images: Sequence[UploadedImage],
        mode: PromptMode,
        config: PipelineConfig | None = None,
    ) -> PromptResult:
        """Run the pipeline and return the structured result. Never raises."""

    @abstractmethod
    async def generate_prompts(
        self,
        images: Sequence[UploadedImage],
        mode: PromptMode,
        config: PipelineConfig | None = None,
    ) -> str:
        """
        Generate prompts for the uploaded images.

        Returns the prompt text, the empty-selection notice, or an error string
        starting with "An error occurred" / "An unknown error occurred".
        """
