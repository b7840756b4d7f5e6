import msgspec
from abc import ABC, abstractmethod

from pewbench.logging.config import LoggerConfig


class BaseLogHandler(ABC):
    """
    Abstract base class for log handlers, defining how log messages
    should be pushed to their respective destinations.
    """

    def __init__(self):
        self._json_encode = None
        self._primary_config = None

    @property
    def json_encode(self):
        """Lazily initialize the JSON encoder."""
        if self._json_encode is None:
            self._json_encode = msgspec.json.Encoder().encode
        return self._json_encode

    @property
    def primary_config(self):
        """Get the primary config."""
        return self._primary_config

    def add_primary_config(self, config: LoggerConfig):
        """
        Add the primary configuration to the handler.
        """
        self._primary_config = config

    def close(self) -> None:
        """Release any resources held by the handler."""

    @abstractmethod
    def push(self, buffer: list[str]) -> None:
        """
        Flushes the given buffer of log entries in some way.

        Args:
            buffer (list[str]): The list of log messages to push.
        """
        pass
