"""Synchronous buffered logger used by the harness."""

import sys
import traceback

from pewbench.logging.config import LoggerConfig, LogLevel
from pewbench.logging.handlers import BaseLogHandler, StreamLogHandler
from pewbench.time import datetime_now


class Logger:
    """A simple logger that buffers messages and pushes them to.

    configured handlers when the buffer fills, when a message at or above
    the flush level arrives, or when ``flush()`` is called.

    Benchmarks run synchronously, so pushing happens inline. Buffering keeps
    handler I/O out of the hot path while low-severity messages accumulate.
    """

    def __init__(
        self,
        name: str = "",
        config: LoggerConfig = None,
        handlers: list[BaseLogHandler] | None = None,
    ):
        """Initializes a Logger with specified configuration and handlers.

        Args:
            name (str): Name of the logger. Defaults to an empty string.
            config (LoggerConfig): Configuration settings for the logger (base level, stderr, buffer size, etc.).
            handlers (list[BaseLogHandler], optional): A list of handler objects that inherit from BaseLogHandler.
                Defaults to an empty list if not provided.

        Raises:
            TypeError: If one of the provided handlers does not inherit from BaseLogHandler.

        """
        self._name = name

        self._config = config
        if self._config is None:
            self._config = LoggerConfig()

        self._handlers = list(handlers) if handlers is not None else []
        for handler in self._handlers:
            if not isinstance(handler, BaseLogHandler):
                raise TypeError(
                    f"Invalid handler class; expected BaseLogHandler but got {type(handler)}"
                )

        if self._config.do_stderr:
            self._handlers.append(StreamLogHandler())

        for handler in self._handlers:
            handler.add_primary_config(self._config)

        self._buffer: list[str] = []
        self._is_running = True

    def flush(self) -> None:
        """Flushes the log message buffer to all handlers."""
        if not self._buffer:
            return

        buffer, self._buffer = self._buffer, []
        for handler in self._handlers:
            handler.push(buffer)

    def _process_log(self, level: LogLevel, msg: str):
        """Buffers a formatted log message, flushing when required.

        Args:
            level (LogLevel): The severity level of the message.
            msg (str): The actual log message.

        """
        try:
            log_msg = self._config.str_format % {
                "asctime": datetime_now(),
                "name": self._name,
                "levelname": level.name,
                "message": msg,
            }
        except (KeyError, TypeError, ValueError):
            traceback.print_exc(file=sys.stderr)
            return

        self._buffer.append(log_msg)
        if (
            level >= self._config.flush_level
            or len(self._buffer) >= self._config.buffer_size
        ):
            self.flush()

    def _should_log(self, level: LogLevel) -> bool:
        return self._is_running and self._config.base_level <= level

    def set_log_level(self, level: LogLevel) -> None:
        """Modify the logger's base log level at runtime.

        Args:
            level (LogLevel): The new base log level.

        """
        self.debug(f"Changing base log level from {self._config.base_level.name} to {level.name}")
        self._config.base_level = level
        for handler in self._handlers:
            handler.add_primary_config(self._config)

    def trace(self, msg: str) -> None:
        """Send a trace-level log message."""
        if self._should_log(LogLevel.TRACE):
            self._process_log(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        """Send a debug-level log message."""
        if self._should_log(LogLevel.DEBUG):
            self._process_log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        """Send an info-level log message."""
        if self._should_log(LogLevel.INFO):
            self._process_log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        """Send a warning-level log message."""
        if self._should_log(LogLevel.WARNING):
            self._process_log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        """Send an error-level log message."""
        if self._should_log(LogLevel.ERROR):
            self._process_log(LogLevel.ERROR, msg)

    def shutdown(self) -> None:
        """Flushes any buffered messages and closes all handlers."""
        self.flush()
        self._is_running = False
        for handler in self._handlers:
            handler.close()

    def is_running(self) -> bool:
        """Check if the logger is running."""
        return self._is_running


_default_logger: Logger | None = None


def get_logger() -> Logger:
    """Return the process-wide harness logger, creating it on first use."""
    global _default_logger
    if _default_logger is None:
        _default_logger = Logger(name="pewbench")
    return _default_logger


def set_logger(logger: Logger) -> Logger:
    """Replace the process-wide harness logger, returning the previous one."""
    global _default_logger
    previous = get_logger()
    _default_logger = logger
    return previous
