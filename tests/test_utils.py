import logging

import pytest
from rich.logging import RichHandler

from argmatches.utils import running_in_container, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli_mode():
    setup_logging(mode="cli")
    root = logging.getLogger()
    assert any(isinstance(handler, RichHandler) for handler in root.handlers)


def test_setup_logging_json_mode_with_file(tmp_path):
    log_file = tmp_path / "argmatches.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    logging.getLogger("argmatches").debug("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert '"message": "hello"' in log_file.read_text(encoding="UTF-8")


def test_setup_logging_env_mode(monkeypatch):
    monkeypatch.setenv("ARGMATCHES_LOG_MODE", "json")
    setup_logging()
    root = logging.getLogger()
    assert not any(isinstance(handler, RichHandler) for handler in root.handlers)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError):
        setup_logging(mode="xml")


def test_running_in_container_returns_bool():
    assert isinstance(running_in_container(), bool)
