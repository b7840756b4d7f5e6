import os

from pewbench.logging.handlers.base import BaseLogHandler


class FileLogHandler(BaseLogHandler):
    """
    A log handler that appends log messages to a text or JSON-lines file.
    """

    def __init__(self, filepath: str, create: bool = False) -> None:
        """
        Initialize the FileLogHandler with a target file path.

        Args:
            filepath (str): Path to the file for appending logs. Must end with
                ".txt" (plain lines) or ".jsonl" (one JSON string per line).
            create (bool): Create the file and its directory if missing.

        Raises:
            ValueError: If the provided filepath has another extension.
        """
        super().__init__()

        if not filepath.endswith((".txt", ".jsonl")):
            raise ValueError(
                f"Invalid filepath; expected string ending with '.txt' or '.jsonl' but got {filepath}"
            )
        self.as_json = filepath.endswith(".jsonl")

        if create:
            directory = os.path.dirname(filepath)
            if directory and not os.path.exists(directory):
                os.makedirs(directory, exist_ok=True)
            if not os.path.exists(filepath):
                with open(filepath, "w"):
                    pass  # Create empty file
        self.filepath = filepath

    def push(self, buffer: list[str]) -> None:
        if self.as_json:
            lines = [self.json_encode({"msg": msg}).decode() for msg in buffer]
        else:
            lines = buffer
        with open(self.filepath, "a") as file:
            file.write("\n".join(lines) + "\n")
            file.flush()
