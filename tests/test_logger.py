import logging

import pytest

from utils import logger as logger_module


@pytest.fixture
def fresh_root(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(logger_module, "_initialized", False)
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    return root


def test_attaches_one_stdout_handler_when_root_is_bare(fresh_root):
    logger_module.get_logger("a")
    logger_module.get_logger("b")

    assert len(fresh_root.handlers) == 1
    assert isinstance(fresh_root.handlers[0], logging.StreamHandler)


def test_leaves_host_handlers_alone(fresh_root, monkeypatch):
    host = logging.NullHandler()
    fresh_root.handlers.append(host)
    monkeypatch.setattr(logger_module, "LOG_LEVEL", "DEBUG")

    logger_module.get_logger("repositories.base")

    assert fresh_root.handlers == [host]
    assert fresh_root.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(fresh_root, monkeypatch):
    monkeypatch.setattr(logger_module, "LOG_LEVEL", "CHATTY")

    logger_module.get_logger("x")

    assert fresh_root.level == logging.INFO
