from collections.abc import Iterator

import pytest

from pewbench.config import RunnerConfig, set_config
from pewbench.logging import BaseLogHandler, Logger, LoggerConfig, LogLevel, set_logger
from pewbench.reporting import HEADER_LATCH
from pewbench.runner import reset_runner


def pytest_configure(config: pytest.Config) -> None:
    """Register shared markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (uses the real CPU clock)"
    )


class FakeTime:
    """Deterministic nanosecond time source; only moves when told to."""

    def __init__(self, start: int = 1_000) -> None:
        self.value = start
        self.calls = 0

    def advance(self, ns: int) -> None:
        self.value += ns

    def __call__(self) -> int:
        self.calls += 1
        return self.value


class CollectingLogHandler(BaseLogHandler):
    """Keeps every pushed log line in memory."""

    def __init__(self) -> None:
        super().__init__()
        self.lines: list[str] = []

    def push(self, buffer: list[str]) -> None:
        self.lines.extend(buffer)

    def contains(self, text: str) -> bool:
        return any(text in line for line in self.lines)


@pytest.fixture
def fake_time() -> FakeTime:
    """Return a controllable time source for Clock/State/BenchmarkRunner."""
    return FakeTime()


@pytest.fixture
def log_handler() -> CollectingLogHandler:
    return CollectingLogHandler()


@pytest.fixture(autouse=True)
def quiet_logger(log_handler: CollectingLogHandler) -> Iterator[Logger]:
    """Route harness diagnostics into memory instead of stderr."""
    logger = Logger(
        name="pewbench-test",
        config=LoggerConfig(base_level=LogLevel.DEBUG, do_stderr=False, buffer_size=1),
        handlers=[log_handler],
    )
    previous = set_logger(logger)
    yield logger
    set_logger(previous)


@pytest.fixture(autouse=True)
def fresh_process_state() -> Iterator[None]:
    """Reset the one-shot header, the active config and the default runner."""
    HEADER_LATCH.reset()
    previous = set_config(RunnerConfig.default())
    reset_runner()
    yield
    reset_runner()
    set_config(previous)
    HEADER_LATCH.reset()
