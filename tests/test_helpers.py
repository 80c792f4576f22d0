"""
Shared test utilities and mock factories

This module provides reusable mock factories and helpers to reduce code duplication
across test files.
"""

import json
from unittest.mock import Mock

from pydantic import BaseModel

from networking.config import Config


class Item(BaseModel):
    """Response shape used across executor tests"""

    id: int
    name: str


def create_mock_response(status_code=200, content=b"", json_body=None):
    """
    Factory for creating mock requests.Response objects

    Args:
        status_code: HTTP status code to return (default: 200)
        content: Raw response body bytes
        json_body: Object serialized as the body (overrides content)

    Returns:
        Mock response with status_code and content
    """
    mock_response = Mock()
    mock_response.status_code = status_code
    if json_body is not None:
        content = json.dumps(json_body).encode()
    mock_response.content = content
    return mock_response


def create_mock_http_client(status_code=200, content=b"", json_body=None, side_effect=None):
    """
    Factory for creating mock HTTP clients

    Args:
        status_code: HTTP status code to return (default: 200)
        content: Raw response body bytes
        json_body: Object serialized as the body (optional)
        side_effect: Exception raised by send() instead of returning (optional)

    Returns:
        Mock HTTP client whose send() returns the configured response
    """
    mock_client = Mock()
    if side_effect is not None:
        mock_client.send.side_effect = side_effect
    else:
        mock_client.send.return_value = create_mock_response(status_code, content, json_body)
    return mock_client


def create_test_config(**overrides):
    """
    Factory for creating test configuration objects

    Args:
        **overrides: Config values to override defaults

    Returns:
        Config with sensible test defaults
    """
    config_dict = {
        "http": {"timeout": 5, "user_agent": "networking-test/1.0"},
        "executor": {"max_workers": 2},
        "logging": {"level": "DEBUG"},
    }

    _deep_merge(config_dict, overrides)

    return Config(config_dict)


def _deep_merge(base_dict, override_dict):
    """Recursively merge override_dict into base_dict"""
    for key, value in override_dict.items():
        if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
            _deep_merge(base_dict[key], value)
        else:
            base_dict[key] = value
