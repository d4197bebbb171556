"""Logger interface.

Components take a ``Logger`` by injection and log structured fields as keyword
arguments::

    logger.info("SDK generated", provider="groq", sdk_length=1234)
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract logger accepting a message plus structured key/value fields."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass
