# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Shared fixtures for error reporting tests."""

from unittest.mock import MagicMock

import pytest
import requests

from cloud_error_reporting.configuration import Configuration, ConfigurationOptions
from cloud_error_reporting.silent_logger import SilentLogger


@pytest.fixture
def logger():
    """In-memory logger."""
    return SilentLogger(level="DEBUG")


@pytest.fixture
def options():
    """Options that allow sending outside production."""
    return ConfigurationOptions(
        project_id="test-project",
        key="test-key",
        ignore_environment_check=True,
        service_context={"service": "checkout", "version": "1.2.3"},
        backoff_seconds=0,
    )


@pytest.fixture
def config(options, logger):
    """Configuration built from an empty environment."""
    return Configuration(options, logger, environ={})


@pytest.fixture
def mock_client():
    """Transport client double recording send_error calls."""
    client = MagicMock()
    client.send_error = MagicMock()
    return client


def build_response(status_code: int = 200, body: bytes = b"{}") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.url = "https://clouderrorreporting.googleapis.com/"
    return response


@pytest.fixture
def make_response():
    """Factory for real requests.Response objects."""
    return build_response


@pytest.fixture
def mock_session():
    """requests session whose post returns HTTP 200 with an empty JSON body."""
    session = MagicMock(spec=requests.Session)
    session.post.return_value = build_response()
    return session
