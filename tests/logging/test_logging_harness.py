"""Tests for the harness logger, its config and handlers."""

import io
import json

import pytest

from pewbench.logging import (
    BaseLogHandler,
    FileLogHandler,
    Logger,
    LoggerConfig,
    LogLevel,
    StreamLogHandler,
)


class DummyPayloadHandler(BaseLogHandler):
    def __init__(self) -> None:
        super().__init__()
        self.received = []
        self.closed = False

    def push(self, buffer: list[str]) -> None:
        self.received.append(tuple(buffer))

    def close(self) -> None:
        self.closed = True


def make_logger(handler, **config_kwargs):
    config_kwargs.setdefault("do_stderr", False)
    return Logger(name="test", config=LoggerConfig(**config_kwargs), handlers=[handler])


class TestLoggerConfig:
    """Validate LoggerConfig inputs."""

    def test_default_values(self) -> None:
        cfg = LoggerConfig()
        assert cfg.base_level == LogLevel.INFO
        assert cfg.do_stderr is True
        assert cfg.buffer_size == 64
        assert cfg.flush_level == LogLevel.WARNING

    def test_invalid_buffer_size(self) -> None:
        with pytest.raises(ValueError):
            LoggerConfig(buffer_size=0)

    def test_format_requires_message(self) -> None:
        with pytest.raises(ValueError):
            LoggerConfig(str_format="%(asctime)s only")


class TestLogger:
    def test_rejects_foreign_handler(self):
        with pytest.raises(TypeError):
            Logger(config=LoggerConfig(do_stderr=False), handlers=[object()])

    def test_handlers_receive_primary_config(self):
        handler = DummyPayloadHandler()
        config = LoggerConfig(do_stderr=False)
        Logger(name="test", config=config, handlers=[handler])
        assert handler.primary_config is config

    def test_info_is_buffered_until_flush(self):
        handler = DummyPayloadHandler()
        logger = make_logger(handler)
        logger.info("hello")
        assert handler.received == []

        logger.flush()
        assert len(handler.received) == 1
        assert handler.received[0][0].endswith("[INFO] test - hello")

    def test_warning_flushes_immediately(self):
        handler = DummyPayloadHandler()
        logger = make_logger(handler)
        logger.info("first")
        logger.warning("second")
        assert len(handler.received) == 1
        assert len(handler.received[0]) == 2

    def test_full_buffer_flushes(self):
        handler = DummyPayloadHandler()
        logger = make_logger(handler, buffer_size=3)
        for i in range(7):
            logger.info(f"msg {i}")
        assert [len(batch) for batch in handler.received] == [3, 3]

    def test_level_filtering(self):
        handler = DummyPayloadHandler()
        logger = make_logger(handler, base_level=LogLevel.WARNING)
        logger.trace("t")
        logger.debug("d")
        logger.info("i")
        logger.flush()
        assert handler.received == []

        logger.error("e")
        assert "[ERROR]" in handler.received[0][0]

    def test_trace_level(self):
        handler = DummyPayloadHandler()
        logger = make_logger(handler, base_level=LogLevel.TRACE)
        logger.trace("t")
        logger.flush()
        assert "[TRACE]" in handler.received[0][0]

    def test_set_log_level(self):
        handler = DummyPayloadHandler()
        logger = make_logger(handler)
        logger.set_log_level(LogLevel.DEBUG)
        logger.debug("now visible")
        logger.flush()
        assert any("now visible" in line for batch in handler.received for line in batch)

    def test_shutdown_flushes_and_closes(self):
        handler = DummyPayloadHandler()
        logger = make_logger(handler)
        logger.info("pending")
        logger.shutdown()
        assert handler.received
        assert handler.closed
        assert not logger.is_running()

        logger.error("ignored")
        assert len(handler.received) == 1

    def test_stderr_handler_added(self, capsys):
        logger = Logger(name="stderr", config=LoggerConfig())
        logger.warning("to stderr")
        captured = capsys.readouterr()
        assert "to stderr" in captured.err
        assert captured.out == ""


class TestHandlers:
    def test_stream_handler(self):
        stream = io.StringIO()
        StreamLogHandler(stream).push(["a", "b"])
        assert stream.getvalue() == "a\nb\n"

    def test_file_handler_requires_known_extension(self, tmp_path):
        with pytest.raises(ValueError):
            FileLogHandler(str(tmp_path / "log.csv"))

    def test_file_handler_text(self, tmp_path):
        path = tmp_path / "logs" / "run.txt"
        handler = FileLogHandler(str(path), create=True)
        assert path.exists()
        handler.push(["one", "two"])
        handler.push(["three"])
        assert path.read_text() == "one\ntwo\nthree\n"

    def test_file_handler_jsonl(self, tmp_path):
        path = tmp_path / "run.jsonl"
        handler = FileLogHandler(str(path), create=True)
        handler.push(['quoted "msg"'])
        [line] = path.read_text().splitlines()
        assert json.loads(line) == {"msg": 'quoted "msg"'}
