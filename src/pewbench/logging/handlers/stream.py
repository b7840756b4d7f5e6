import sys
from typing import TextIO

from pewbench.logging.handlers.base import BaseLogHandler


class StreamLogHandler(BaseLogHandler):
    """
    A log handler that writes log messages to a text stream (stderr by default).
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected/captured stderr is honoured.
        return self._stream if self._stream is not None else sys.stderr

    def push(self, buffer: list[str]) -> None:
        self.stream.write("\n".join(buffer) + "\n")
        self.stream.flush()
