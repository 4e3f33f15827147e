"""
================================================================================
Capture Suites Pytest Configuration
================================================================================

Registers markers and provides shared fixtures for the unit tests:
    - fresh configuration per test
    - a root suite with the tests API installed on a context
    - a stub browser for capture state activation
    - a loguru sink collecting warnings

================================================================================
"""

from typing import Any, Dict, Generator, List
from unittest.mock import MagicMock

import pytest
from loguru import logger

from capture_suites.common import ConfigLoader, init_logger
from capture_suites.framework import Suite, TestsApi, install_tests_api


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - core authoring contract"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - validation and helpers"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases"
    )


@pytest.fixture(scope="session", autouse=True)
def _logger_ready(_authoring_env_defaults) -> None:
    """Configure loguru once so later init_logger() calls keep test sinks."""
    init_logger()


@pytest.fixture(autouse=True)
def fresh_config() -> Generator[None, None, None]:
    """Drop the configuration singleton around every test."""
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


@pytest.fixture
def root_suite() -> Suite:
    return Suite.create("")


@pytest.fixture
def context(root_suite: Suite) -> Dict[str, Any]:
    """Authoring context with ``suite`` installed, attached to ``root_suite``."""
    namespace: Dict[str, Any] = {}
    install_tests_api(namespace, root_suite)
    return namespace


@pytest.fixture
def tests_api(context: Dict[str, Any]) -> TestsApi:
    return context["suite"].__self__


@pytest.fixture
def browser() -> MagicMock:
    """Browser stub whose action sequences can be performed."""
    stub = MagicMock(name="browser")
    stub.create_action_sequence.return_value.perform.return_value = None
    return stub


@pytest.fixture
def warnings_log() -> Generator[List[str], None, None]:
    """Collect loguru WARNING+ messages emitted during the test."""
    messages: List[str] = []
    handler_id = logger.add(messages.append, level="WARNING", format="{message}")
    yield messages
    logger.remove(handler_id)
