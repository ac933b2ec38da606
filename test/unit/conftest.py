import textwrap

import pytest

from izn.logger import logger


@pytest.fixture
def write_izn(tmp_path):
    """Write dedented izn text to a file under tmp_path and return its path."""

    def _write(content, name="config.izn"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def restores_izn_logger():
    """configure_logger() disables propagation, which would hide records from caplog."""
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
