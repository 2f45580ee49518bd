"""Tests for the Loguru setup."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger

from src.ecom.runtime.config.config_data import ConfigData, LoggingConfig
from src.ecom.runtime.context import with_context
from src.ecom.runtime.logging_setup import configure_logging


@pytest.fixture(autouse=True)
def reset_logger() -> Generator[None]:
    yield
    logger.remove()


class TestConfigureLogging:
    def test_file_sink_receives_records(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "ecom.log"

        with with_context(ConfigData(logging=LoggingConfig(file=str(log_file)))):
            configure_logging()
        logger.info("hello from the file sink")
        logger.complete()

        assert "hello from the file sink" in log_file.read_text()

    def test_standard_logging_is_intercepted(self, tmp_path: Path):
        log_file = tmp_path / "ecom.log"

        with with_context(ConfigData(logging=LoggingConfig(file=str(log_file)))):
            configure_logging()
        logging.getLogger("some.library").warning("routed through loguru")
        logger.complete()

        assert "routed through loguru" in log_file.read_text()

    def test_level_argument_overrides_config(self, tmp_path: Path):
        log_file = tmp_path / "ecom.log"

        with with_context(ConfigData(logging=LoggingConfig(level="WARNING", file=str(log_file)))):
            configure_logging("DEBUG")
        logger.debug("debug record")
        logger.complete()

        assert "debug record" in log_file.read_text()

    def test_records_below_level_are_dropped(self, tmp_path: Path):
        log_file = tmp_path / "ecom.log"

        with with_context(ConfigData(logging=LoggingConfig(level="WARNING", file=str(log_file)))):
            configure_logging()
        logger.info("quiet record")
        logger.warning("loud record")
        logger.complete()

        content = log_file.read_text()
        assert "quiet record" not in content
        assert "loud record" in content

    def test_json_format_serializes_records(self, tmp_path: Path):
        log_file = tmp_path / "ecom.json"

        with with_context(ConfigData(logging=LoggingConfig(format="json", file=str(log_file)))):
            configure_logging()
        logger.info("structured record")
        logger.complete()

        assert '"message": "structured record"' in log_file.read_text()
