"""Configuration classes and enums for harness logging."""

from enum import IntEnum


class LogLevel(IntEnum):
    """Log level enumeration."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4


class LoggerConfig:
    """Configuration for the harness logger."""

    def __init__(
        self,
        base_level: LogLevel = LogLevel.INFO,
        do_stderr: bool = True,
        str_format: str = "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        buffer_size: int = 64,
        flush_level: LogLevel = LogLevel.WARNING,
    ):
        """Initializes the LoggerConfig.

        Args:
            base_level (LogLevel): The minimum log level that will be logged.
                Defaults to LogLevel.INFO.
            do_stderr (bool): If True, logs are also written to stderr. Stdout is
                left to benchmark results. Defaults to True.
            str_format (str): The format string for log messages.
                Supports %(asctime)s, %(levelname)s, %(name)s, and %(message)s.
                Defaults to "%(asctime)s [%(levelname)s] %(name)s - %(message)s".
            buffer_size (int): Number of messages buffered before a flush. Defaults to 64.
            flush_level (LogLevel): Messages at or above this level flush the
                buffer immediately. Defaults to LogLevel.WARNING.

        Raises:
            ValueError: If str_format does not contain '%(message)s' placeholder.
            ValueError: If buffer_size <= 0.

        """
        self.base_level = base_level
        self.do_stderr = do_stderr
        self.flush_level = flush_level

        self.str_format = str_format
        if "%(message)s" not in self.str_format:
            raise ValueError("Format string must contain '%(message)s' placeholder")

        self.buffer_size = buffer_size
        if self.buffer_size <= 0:
            raise ValueError(
                f"Invalid buffer size; expected >0 but got {self.buffer_size}"
            )
