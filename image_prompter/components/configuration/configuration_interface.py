from abc import ABC, abstractmethod
from typing import Any, TypeVar

T = TypeVar("T")

MISSING: Any = object()


class ConfigurationInterface(ABC):
    @abstractmethod
    def get_configuration(self, key: str, type_: type[T], default: Any = MISSING) -> T:
        """
        Return the configuration value for ``key`` converted to ``type_``.

        Raises:
            KeyError: If the key is unset and no default was given.
            ValueError: If the value cannot be converted to ``type_``.
        """
