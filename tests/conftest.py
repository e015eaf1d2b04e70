"""
Pytest configuration and fixtures for CoreNLP client tests.

Provides a recording fake transport, fixed server configs and environment cleanup.
"""

import os
import pytest

from corenlp_client.domain.interfaces import HttpTransport
from corenlp_client.domain.models import ServerConfig, TransportResponse


class FakeTransport(HttpTransport):
    """HttpTransport double that records calls and replays a canned outcome."""

    def __init__(self, outcome=None):
        self.outcome = outcome or TransportResponse(status_code=200, body="{}")
        self.posts = []
        self.gets = []

    def post(self, endpoint, body, params, timeout=None):
        self.posts.append({"endpoint": endpoint, "body": body, "params": dict(params), "timeout": timeout})
        return self.outcome

    def get(self, endpoint, timeout=None):
        self.gets.append({"endpoint": endpoint, "timeout": timeout})
        return self.outcome


@pytest.fixture
def fake_transport():
    """Fake transport answering 200 with an empty JSON object."""
    return FakeTransport()


@pytest.fixture
def transport_factory():
    """Factory for fake transports with a specific outcome."""
    return FakeTransport


@pytest.fixture
def server_config():
    """Local server on the default port."""
    return ServerConfig(host="localhost", base_path="/", port=9000, recv_timeout=30000, connect_timeout=8000)


@pytest.fixture
def clean_environment():
    """Clean CORENLP_* environment variables for testing."""
    env_vars_to_clean = [
        'CORENLP_HOST',
        'CORENLP_BASE_PATH',
        'CORENLP_PORT',
        'CORENLP_RECV_TIMEOUT',
        'CORENLP_CONNECT_TIMEOUT',
    ]

    original_env = {}
    for var in env_vars_to_clean:
        if var in os.environ:
            original_env[var] = os.environ[var]
            del os.environ[var]

    yield

    for var in env_vars_to_clean:
        os.environ.pop(var, None)
    for var, value in original_env.items():
        os.environ[var] = value


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
    config.addinivalue_line(
        "markers", "env: mark test as environment resolution test"
    )
