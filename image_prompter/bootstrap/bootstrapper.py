from image_prompter.dependencies.components import get_components
from image_prompter.dependencies.services import get_prompt_service
from image_prompter.services.PromptService.prompt_service_interface import (
    PromptServiceInterface,
)


def bootstrap_prompt_service(
    env: str = "development",
    config_path: str = "configuration",
) -> PromptServiceInterface:
    components = get_components(env=env, config_path=config_path)
    return get_prompt_service(components)
