"""
Unit tests for the package logger helper.

The library must configure only its own logger namespace, never the root logger.
"""

import logging
import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch
import pytest

from corenlp_client.infrastructure.logging import LOG_FORMAT, ROOT_LOGGER, get_logger

REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def fresh_package_logger():
    """Strip handlers/level from the package logger and restore them afterwards."""
    package_logger = logging.getLogger(ROOT_LOGGER)
    saved_handlers = list(package_logger.handlers)
    saved_level = package_logger.level
    for h in saved_handlers:
        package_logger.removeHandler(h)
    package_logger.setLevel(logging.NOTSET)

    yield package_logger

    for h in list(package_logger.handlers):
        package_logger.removeHandler(h)
    for h in saved_handlers:
        package_logger.addHandler(h)
    package_logger.setLevel(saved_level)


class TestGetLogger:
    """Test logger naming and handler placement."""

    def test_name_prefixed(self):
        assert get_logger("responses").name == "corenlp_client.responses"
        assert get_logger("corenlp_client.api").name == "corenlp_client.api"

    @patch.dict(os.environ, {}, clear=True)
    def test_root_logger_untouched(self, fresh_package_logger):
        """Test root handlers and level are unchanged; only a NullHandler is added to the package."""
        root = logging.getLogger()
        handlers_before = list(root.handlers)
        level_before = root.level

        get_logger("corenlp_client.application.responses")

        assert root.handlers == handlers_before
        assert root.level == level_before
        assert [type(h) for h in fresh_package_logger.handlers] == [logging.NullHandler]

    @patch.dict(os.environ, {'CORENLP_LOG_LEVEL': 'debug'})
    def test_level_from_environment(self, fresh_package_logger):
        """Test CORENLP_LOG_LEVEL adds a stream handler on the package logger only."""
        root_handlers = list(logging.getLogger().handlers)

        get_logger("api")

        assert fresh_package_logger.level == logging.DEBUG
        streams = [h for h in fresh_package_logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(streams) == 1
        assert streams[0].formatter._fmt == LOG_FORMAT
        assert logging.getLogger().handlers == root_handlers

    def test_configured_once(self, fresh_package_logger):
        get_logger("a")
        get_logger("b")
        assert len(fresh_package_logger.handlers) >= 1
        assert len([h for h in fresh_package_logger.handlers if isinstance(h, logging.NullHandler)]) == 1


class TestHostApplicationConfig:
    """Test the host application's basicConfig still applies after importing the client."""

    def test_basic_config_after_import(self):
        script = (
            "import logging\n"
            "import corenlp_client.api\n"
            "logging.basicConfig(level=logging.WARNING, format='APP %(message)s')\n"
            "root = logging.getLogger()\n"
            "print(logging.getLevelName(root.level), [h.formatter._fmt for h in root.handlers])\n"
        )
        env = dict(os.environ)
        env.pop("CORENLP_LOG_LEVEL", None)
        env["PYTHONPATH"] = os.pathsep.join(p for p in [str(REPO_ROOT), env.get("PYTHONPATH", "")] if p)

        out = subprocess.run([sys.executable, "-c", script], capture_output=True, text=True, env=env, check=True)

        assert out.stdout.strip() == "WARNING ['APP %(message)s']"
