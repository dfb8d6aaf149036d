"""
Turns pipeline results into the text handed back to callers.

Callers detect failures by prefix, so the error strings below are part of the
public contract.
"""

from image_prompter.entities.prompt_result import PromptResult

EMPTY_SELECTION_NOTICE = "Please upload at least one image."
ERROR_PREFIX = "An error occurred"
UNKNOWN_ERROR_PREFIX = "An unknown error occurred"
UNKNOWN_ERROR_MESSAGE = f"{UNKNOWN_ERROR_PREFIX} while generating prompts."
SEPARATE_PROMPTS_SEPARATOR = "\n\n---\n\n"


def format_error(error: BaseException) -> str:
    message = str(error)
    if not message.strip():
        return UNKNOWN_ERROR_MESSAGE
    return f"{ERROR_PREFIX} while generating prompts: {message}"


def format_result(result: PromptResult) -> str:
    if result.error is not None:
        return format_error(result.error)
    return result.text


def is_error_outcome(text: str) -> bool:
    """Return True when ``text`` is one of the error strings produced above."""
    return text.startswith((ERROR_PREFIX, UNKNOWN_ERROR_PREFIX))
