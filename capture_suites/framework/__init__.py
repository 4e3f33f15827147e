"""
================================================================================
Suite Authoring Framework
================================================================================

Declarative API for building the tree of visual regression suites.

Components:
    - suite: Suite tree node and chainable builder methods
    - state: Capture states and the browser protocol they are activated with
    - browsers: Skip rule descriptors, normalization and matching
    - tests_api: The ``suite(name, callback)`` entry point and authoring session

Author: Automation Team
License: MIT
================================================================================
"""

from .browsers import BrowserDescriptor, normalize_skip_browsers
from .exceptions import SuiteConfigurationError
from .state import ActionSequence, Browser, CaptureState
from .suite import Suite
from .tests_api import AuthoringSession, TestsApi, install_tests_api

__all__ = [
    "ActionSequence",
    "AuthoringSession",
    "Browser",
    "BrowserDescriptor",
    "CaptureState",
    "Suite",
    "SuiteConfigurationError",
    "TestsApi",
    "install_tests_api",
    "normalize_skip_browsers",
]
