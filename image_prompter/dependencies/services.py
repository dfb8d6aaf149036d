from image_prompter.bootstrap.components import Components
from image_prompter.components.configuration.configuration_interface import (
    ConfigurationInterface,
)
from image_prompter.components.logger.logger_interface import LoggerInterface
from image_prompter.entities.prompt_result import PipelineConfig
from image_prompter.services.EncoderService.image_encoder import ImageEncoder
from image_prompter.services.EncoderService.image_encoder_interface import (
    ImageEncoderInterface,
)
from image_prompter.services.GenerationService.gemini_generation_service import (
    GeminiGenerationService,
)
from image_prompter.services.GenerationService.generation_service_interface import (
    GenerationServiceInterface,
)
from image_prompter.services.PromptService.prompt_service import (
    GenerationServiceFactory,
    PromptService,
)
from image_prompter.services.PromptService.prompt_service_interface import (
    PromptServiceInterface,
)


def get_pipeline_config(components: Components) -> PipelineConfig:
    """
    Resolve the credential and model once for the lifetime of the service.

    A missing key is not an error here; each run reports it instead.
    """
    configuration = components.get_component(ConfigurationInterface)

    api_key = configuration.get_configuration("GEMINI_API_KEY", str, default=None)
    model_name = configuration.get_configuration(
        "MODEL_NAME", str, default="gemini-2.5-flash"
    )

    return PipelineConfig(api_key=api_key, model_name=model_name)


def get_image_encoder(components: Components) -> ImageEncoderInterface:
    logger = components.get_component(LoggerInterface)
    return ImageEncoder(logger=logger.get_logger("ImageEncoder"))


def get_generation_service_factory(components: Components) -> GenerationServiceFactory:
    logger = components.get_component(LoggerInterface).get_logger(
        "GeminiGenerationService"
    )

    def create(config: PipelineConfig) -> GenerationServiceInterface:
        return GeminiGenerationService(
            api_key=config.api_key or "",
            model_name=config.model_name,
            logger=logger,
        )

    return create


def get_prompt_service(components: Components) -> PromptServiceInterface:
    return PromptService(
        encoder=get_image_encoder(components),
        generation_service_factory=get_generation_service_factory(components),
        config=get_pipeline_config(components),
        logger=components.get_component(LoggerInterface).get_logger("PromptService"),
    )
