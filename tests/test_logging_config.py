import logging
import sys

import pytest

from adyen_mcp.core.logging_config import setup_logging


@pytest.fixture
def root_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def added_handlers(root, before):
    return [h for h in root.handlers if h not in before]


def test_setup_logging_writes_file_and_stderr(tmp_path, root_handlers):
    before = list(root_handlers.handlers)

    setup_logging(tmp_path, "server.log", level="DEBUG")
    new = added_handlers(root_handlers, before)

    file_handlers = [h for h in new if isinstance(h, logging.FileHandler)]
    stream_handlers = [h for h in new if type(h) is logging.StreamHandler]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename.startswith(str(tmp_path / "server_"))
    assert all(h.stream is sys.stderr for h in stream_handlers)
    assert not any(getattr(h, "stream", None) is sys.stdout for h in root_handlers.handlers)
    assert root_handlers.level == logging.DEBUG

    logging.getLogger("adyen_mcp.test").info("hello")
    file_handlers[0].flush()
    log_files = list(tmp_path.glob("server_*.log"))
    assert len(log_files) == 1
    assert "hello" in log_files[0].read_text(encoding="utf-8")


def test_setup_logging_is_idempotent(tmp_path, root_handlers):
    before = list(root_handlers.handlers)

    setup_logging(tmp_path)
    count = len(root_handlers.handlers)
    setup_logging(tmp_path)

    assert len(root_handlers.handlers) == count
    assert len(added_handlers(root_handlers, before)) <= 2


def test_unknown_level_falls_back_to_info(tmp_path, root_handlers):
    setup_logging(tmp_path, level="chatty")

    assert root_handlers.level == logging.INFO
