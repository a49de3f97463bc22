"""Pytest configuration and fixtures."""

import logging
import textwrap
from pathlib import Path

import pytest

from screenplay_ensure import Actor


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up screenplay_ensure loggers after each test to prevent handler leaks."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("screenplay_ensure")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def actor():
    return Actor.named("Tracy")


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str, name: str = "ensure.yaml") -> Path:
        p = tmp_path / name
        p.write_text(textwrap.dedent(content))
        return p

    return _write
