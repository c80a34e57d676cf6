import logging

import pytest

from cypoints import config
from cypoints.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's real configuration."""
    monkeypatch.delenv(config.CYPOINTS_CONFIG, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    config.clear_cache()
    yield
    config.clear_cache()
    # handlers installed by the CLI point at this test's captured streams
    logging.getLogger(LOGGER_NAME).handlers.clear()
