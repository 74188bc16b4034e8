"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_under_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should place log files in logs/<subdir>/."""
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20230301"),
    )

    builder = logger_module.LoggerBuilder()
    parse_logger = (
        builder.name("ledger.test.parse")
        .subdir("parse")
        .prefix("parse_logs")
        .console(False)
        .level(logging.DEBUG)
        .build()
    )

    assert parse_logger.name == "ledger.test.parse"
    assert parse_logger.level == logging.DEBUG
    assert parse_logger.propagate is False
    file_handlers = [
        h
        for h in parse_logger.handlers
        if isinstance(h, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    expected_path = tmp_path / "logs" / "parse" / "20230301_parse_logs.log"
    assert file_handlers[0].baseFilename == str(expected_path)
    assert len(parse_logger.handlers) == 1
    # A second build reuses the configured logger.
    assert builder.build() is parse_logger
    for handler in list(parse_logger.handlers):
        handler.close()
        parse_logger.removeHandler(handler)


def test_builder_uses_injected_factories(tmp_path, monkeypatch):
    """Custom formatter and handler factories should be honoured."""
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()
    seen_paths = []

    def _file_factory(path, formatter):
        seen_paths.append(path)
        assert formatter is fmt
        return file_handler

    built = (
        logger_module.LoggerBuilder()
        .name("ledger.test.factories")
        .formatter(lambda: fmt)
        .file_handler(_file_factory)
        .console_handler(lambda formatter: console_handler)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]
    assert seen_paths[0].parent == tmp_path / "logs"
    for handler in list(built.handlers):
        built.removeHandler(handler)


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    file_handler.close()

    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger level methods should forward to the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("ledger.test")
    logger.debug("dbg")
    logger.info("parsed")
    logger.warning("zero amount")
    logger.error("unbalanced")
    logger.critical("crit")

    fake_logger.debug.assert_called_with("dbg")
    fake_logger.info.assert_called_with("parsed")
    fake_logger.warning.assert_called_with("zero amount")
    fake_logger.error.assert_called_with("unbalanced")
    fake_logger.critical.assert_called_with("crit")
    assert logger_module.Logger("other") is logger


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """get_app_logger and get_usage_logger should return singletons."""
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: MagicMock(),
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert isinstance(app_logger.logger, MagicMock)
