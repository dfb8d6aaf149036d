from dataclasses import dataclass
from enum import Enum


class PipelineState(str, Enum):
    IDLE = "IDLE"
    ENCODING = "ENCODING"
    DISPATCHING = "DISPATCHING"
    AGGREGATING = "AGGREGATING"
    DONE = "DONE"
    FAILED = "FAILED"


@dataclass(frozen=True)
class PipelineConfig:
    """Settings resolved once and handed to each pipeline run."""

    api_key: str | None
    model_name: str = "gemini-2.5-flash"


@dataclass(frozen=True)
class PromptResult:
    """Outcome of one run before it is turned into text.

    ``error`` is set when the run failed; ``text`` is then empty.
    """

    text: str = ""
    error: Exception | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, text: str) -> "PromptResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: Exception) -> "PromptResult":
        return cls(error=error)
