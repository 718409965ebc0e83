import logging

import pytest
from rich.logging import RichHandler

from clab.utils import running_in_container, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli(tmp_path):
    log_file = tmp_path / "clab.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    handlers = logging.getLogger().handlers
    assert isinstance(handlers[0], RichHandler)
    assert isinstance(handlers[1], logging.FileHandler)
    assert handlers[0].level == logging.WARNING

    logging.getLogger("clab").debug("hello file")
    handlers[1].flush()
    assert "hello file" in log_file.read_text(encoding="UTF-8")
    handlers[1].close()


def test_setup_logging_json_without_file():
    setup_logging(mode="json", log_filename=None, console_log_level=logging.INFO)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert type(handlers[0]) is logging.StreamHandler
    assert handlers[0].level == logging.INFO


def test_setup_logging_json_file(tmp_path):
    log_file = tmp_path / "clab.json.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    file_handler = logging.getLogger().handlers[1]
    logging.getLogger("clab").debug("structured")
    file_handler.flush()
    assert '"message": "structured"' in log_file.read_text(encoding="UTF-8")
    file_handler.close()


def test_setup_logging_env_mode(monkeypatch):
    monkeypatch.setenv("CLAB_LOG_MODE", "json")
    setup_logging(log_filename=None)
    assert type(logging.getLogger().handlers[0]) is logging.StreamHandler


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError):
        setup_logging(mode="xml", log_filename=None)


def test_running_in_container_returns_bool():
    assert isinstance(running_in_container(), bool)


def test_setup_logging_leaves_third_party_loggers_alone(tmp_path):
    before = logging.getLogger("markdown_it").level
    setup_logging(mode="cli", log_filename=str(tmp_path / "clab.log"))
    assert logging.getLogger("markdown_it").level == before
