"""
Pytest configuration and shared fixtures
"""

import pytest

from networking import RequestExecutor
from tests.test_helpers import create_test_config


@pytest.fixture
def test_config():
    """Minimal test configuration"""
    return create_test_config()


@pytest.fixture
def make_executor(test_config):
    """
    Build RequestExecutors around a given HTTP client and shut them down afterwards.

    Usage:
        def test_something(make_executor):
            executor = make_executor(create_mock_http_client(json_body={...}))
    """
    executors = []

    def _make(http_client):
        executor = RequestExecutor(http_client=http_client, config_obj=test_config)
        executors.append(executor)
        return executor

    yield _make

    for executor in executors:
        executor.shutdown()
