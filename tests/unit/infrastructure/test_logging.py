import logging
import sys
from pathlib import Path

import pytest
from loguru import logger

from user_crud.runtime.app_startup import configure_logging
from user_crud.runtime.config.config_data import ConfigData
from user_crud.runtime.context import with_context


@pytest.fixture
def restore_logging():
    yield
    logger.remove()
    logger.add(sys.stderr)
    logging.basicConfig(handlers=[], force=True)


def test_file_sink_receives_loguru_and_stdlib_records(tmp_path: Path, restore_logging):
    log_file = tmp_path / "logs" / "user-crud.log"
    override = ConfigData()
    override.logging.file = str(log_file)

    with with_context(override):
        configure_logging("debug")

    logger.info("controller message")
    logging.getLogger("some.library").warning("library message")

    content = log_file.read_text()
    assert "controller message" in content
    assert "library message" in content


def test_level_filters_records(tmp_path: Path, restore_logging):
    log_file = tmp_path / "app.log"
    override = ConfigData()
    override.logging.file = str(log_file)

    with with_context(override):
        configure_logging("WARNING")

    logger.info("hidden")
    logger.warning("shown")

    content = log_file.read_text()
    assert "hidden" not in content
    assert "shown" in content
