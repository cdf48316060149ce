from __future__ import annotations

import logging

from pageconvert import logger as package_logger
from pageconvert.logging import configure_logging, get_logger
from pageconvert.settings import Settings


def test_stdlib_logger_is_configured(capsys) -> None:
    configure_logging(settings=Settings(LOG_JSON="false", LOG_LEVEL="INFO"), force=True)
    logger = get_logger("tests")
    logger.info("hello")

    captured = capsys.readouterr()
    assert "hello" in captured.err.lower()


def test_log_file_handler_is_added(tmp_path) -> None:
    log_file = tmp_path / "pageconvert.log"
    configure_logging(settings=Settings(LOG_FILE=str(log_file)), force=True)

    handlers = logging.getLogger().handlers
    assert any(isinstance(handler, logging.FileHandler) for handler in handlers)

    configure_logging(settings=Settings(), force=True)


def test_uvicorn_loggers_propagate_to_root() -> None:
    uvicorn_logger = logging.getLogger("uvicorn.error")
    uvicorn_logger.addHandler(logging.NullHandler())
    uvicorn_logger.propagate = False

    configure_logging(settings=Settings(), force=True)

    assert uvicorn_logger.handlers == []
    assert uvicorn_logger.propagate is True


def test_package_logger_created_on_import() -> None:
    assert callable(getattr(package_logger, "info", None))
