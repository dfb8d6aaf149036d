"""
Settings-backed configuration component.

Values come from the process environment first and then from the env file
``<config_path>/<env>.env``. Keys are looked up case-insensitively.
"""

import os
from typing import Any, TypeVar, cast

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from image_prompter.components.configuration.configuration_interface import (
    MISSING,
    ConfigurationInterface,
)

T = TypeVar("T")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class PromptSettings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        env_file_encoding="utf-8",
    )

    # API_KEY is the variable name the browser build used
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
    )
    model_name: str = "gemini-2.5-flash"
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    tracing_enabled: bool = False


class Configuration(ConfigurationInterface):
    def __init__(self, env: str, config_path: str) -> None:
        self.env = env
        self.env_file = os.path.join(config_path, f"{env}.env")
        self.settings = PromptSettings(_env_file=self.env_file)  # type: ignore[call-arg]

    def get_configuration(self, key: str, type_: type[T], default: Any = MISSING) -> T:
        value = getattr(self.settings, key.lower(), None)
        if value is None:
            if default is not MISSING:
                return cast(T, default)
            raise KeyError(f"Configuration key {key} is not set")

        if isinstance(value, type_):
            return value

        try:
            return type_(value)  # type: ignore[call-arg]
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"Configuration key {key} cannot be read as {type_.__name__}: {value!r}"
            ) from e
