from __future__ import annotations

import logging

import pytest

from heuropt.foundation.logging import configure_heuropt_logging


@pytest.fixture
def heuropt_logger(monkeypatch):
    logger = logging.getLogger("heuropt")
    monkeypatch.setattr(logger, "propagate", True)
    level = logger.level
    yield logger
    logger.setLevel(level)


def _without_handlers(monkeypatch, logger):
    # pytest installs its capture handlers on the root logger when the test body starts.
    monkeypatch.setattr(logging.getLogger(), "handlers", [])
    monkeypatch.setattr(logger, "handlers", [])


def test_adds_single_handler_when_unconfigured(heuropt_logger, monkeypatch):
    _without_handlers(monkeypatch, heuropt_logger)
    logger = configure_heuropt_logging(level="debug")
    assert logger is heuropt_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False

    configure_heuropt_logging(level=logging.WARNING)
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_respects_existing_root_handlers(heuropt_logger, monkeypatch):
    _without_handlers(monkeypatch, heuropt_logger)
    logging.getLogger().handlers.append(logging.NullHandler())
    logger = configure_heuropt_logging()
    assert logger.handlers == []


def test_unknown_level_rejected(heuropt_logger):
    with pytest.raises(ValueError):
        configure_heuropt_logging(level="loud")
