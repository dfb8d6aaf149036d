class PromptGenerationError(Exception):
    """Base error for prompt generation failures."""


class ConfigurationError(PromptGenerationError):
    """Raised when the backend credential is missing."""


class EmptyInputError(PromptGenerationError):
    """Raised when a request is built without any image."""


class ReadError(PromptGenerationError):
    """Raised when an uploaded image cannot be read."""


class BackendError(PromptGenerationError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
