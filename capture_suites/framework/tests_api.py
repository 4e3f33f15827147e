"""
================================================================================
Tests API
================================================================================

The ``suite(name, callback)`` entry point test-definition files call.

Nesting follows the calling structure: a ``suite`` call made inside another
suite's callback registers a child of that suite. The suite currently being
configured is tracked on an explicit stack owned by each ``TestsApi``, so
separate authoring sessions never share state.

Usage:
    session = AuthoringSession()

    def buttons(suite):
        suite.set_url("/buttons").set_capture_elements(".button")

        def plain(child):
            child.capture("plain").capture("hovered", hover_button)

        session.suite("plain button", plain)

    session.suite("buttons", buttons)
    root = session.finish()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Callable, Dict, List, Optional

from loguru import logger

from capture_suites.common import init_logger, warn_duplicate_names

from .exceptions import SuiteConfigurationError
from .suite import Suite


SuiteCallback = Callable[[Suite], Any]


class TestsApi:
    """
    Suite builder bound to one suite tree.

    Attributes:
        root: Implicit parent of all top-level suites
    """

    __test__ = False  # not a pytest test class

    def __init__(self, root: Suite):
        self.root = root
        self._stack: List[Suite] = [root]

    @property
    def current(self) -> Suite:
        """The suite new suites are appended to."""
        return self._stack[-1]

    def suite(self, name: str, callback: SuiteCallback) -> None:
        """
        Register a suite under the current suite and configure it.

        Args:
            name: Suite name
            callback: Called synchronously with the new suite

        Raises:
            TypeError: name is not a string or callback is not callable
            SuiteConfigurationError: name is empty
        """
        if not isinstance(name, str):
            raise TypeError(f"Suite name must be a string, got {type(name).__name__}")
        if not name:
            raise SuiteConfigurationError("Suite name must not be empty")
        if not callable(callback):
            raise TypeError(
                f"Suite callback must be callable, got {type(callback).__name__}"
            )

        parent = self.current
        if warn_duplicate_names() and any(
            child.name == name for child in parent.children
        ):
            logger.warning(
                f"Suite '{parent.full_name or '<root>'}' already has a child named '{name}'"
            )

        node = Suite.create(name, parent)
        logger.debug(f"Registered suite '{node.full_name}'")

        self._stack.append(node)
        try:
            callback(node)
        finally:
            self._stack.pop()


def install_tests_api(context: Any, root: Suite) -> TestsApi:
    """
    Install ``suite`` on a context shared by test-definition files.

    Args:
        context: A mutable mapping (e.g. module globals) or any object
                 accepting attributes
        root: Suite new top-level suites are attached to

    Returns:
        The TestsApi backing the installed ``suite``
    """
    api = TestsApi(root)
    if isinstance(context, MutableMapping):
        context["suite"] = api.suite
    else:
        setattr(context, "suite", api.suite)
    return api


class AuthoringSession:
    """
    One authoring run: a root suite, its context and its TestsApi.

    Usage:
        session = AuthoringSession()
        session.define(lambda ctx: ctx["suite"]("header", configure_header))
        root = session.finish()
    """

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        init_logger()
        self.root = Suite.create("")
        self.context: Dict[str, Any] = context if context is not None else {}
        self.api = install_tests_api(self.context, self.root)

    def suite(self, name: str, callback: SuiteCallback) -> None:
        self.api.suite(name, callback)

    def define(self, definition: Callable[[Dict[str, Any]], Any]) -> None:
        """Run a test-definition body against the shared context."""
        if not callable(definition):
            raise TypeError(
                f"Definition must be callable, got {type(definition).__name__}"
            )
        definition(self.context)

    def suites(self) -> List[Suite]:
        """All registered suites, depth first, root excluded."""
        return [suite for suite in self.root.walk() if suite is not self.root]

    def finish(self) -> Suite:
        """Log a summary and hand the tree over to the runner."""
        suites = self.suites()
        states = sum(len(suite.states) for suite in suites)
        logger.info(f"Authoring finished: {len(suites)} suites, {states} states")
        return self.root


__all__ = [
    "AuthoringSession",
    "SuiteCallback",
    "TestsApi",
    "install_tests_api",
]
