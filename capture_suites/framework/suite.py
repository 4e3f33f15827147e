"""
================================================================================
Suite
================================================================================

One node of the suite tree plus the chainable builder methods authors call
inside ``suite(...)`` callbacks.

Provides:
    - Tree structure (name, parent, ordered children)
    - Builder methods: set_url, set_capture_elements, before, capture, skip
    - Read-only helpers for runners and reporting (walk, path, should_skip)

Every builder method validates its arguments before touching the node and
returns the node itself:

    suite.set_url("/buttons").set_capture_elements(".button").capture("plain")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from loguru import logger

from capture_suites.common import warn_duplicate_names

from .browsers import BrowserDescriptor, SkipArgument, normalize_skip_browsers
from .exceptions import SuiteConfigurationError
from .state import CaptureState, StateCallback


class Suite:
    """
    A named, nestable group of capture states.

    Attributes:
        name: Suite name; empty only for the root
        parent: Enclosing suite, None for the root
        children: Nested suites in declaration order
        url: Page to open before capturing
        capture_selectors: Flat list of selectors captured for every state
        before_hook: Setup callable run before the states are activated
        states: Capture states in declaration order
        skipped: None (runs everywhere), True (never runs) or a list of
                 BrowserDescriptor the suite must not run in
    """

    def __init__(self, name: str):
        self.name = name
        self.parent: Optional[Suite] = None
        self.children: List[Suite] = []
        self.url: Optional[str] = None
        self.capture_selectors: Optional[List[str]] = None
        self.before_hook: Optional[Callable] = None
        self.states: List[CaptureState] = []
        self.skipped: Union[None, bool, List[BrowserDescriptor]] = None

    @classmethod
    def create(cls, name: str, parent: Optional["Suite"] = None) -> "Suite":
        """
        Create a suite, optionally appending it to ``parent``.

        Raises:
            TypeError: name is not a string
        """
        if not isinstance(name, str):
            raise TypeError(f"Suite name must be a string, got {type(name).__name__}")

        suite = cls(name)
        if parent is not None:
            parent.add_child(suite)
        return suite

    def add_child(self, child: "Suite") -> "Suite":
        """Append ``child`` and make this suite its parent."""
        child.parent = self
        self.children.append(child)
        return child

    # ------------------------------------------------------------------
    # Builder methods
    # ------------------------------------------------------------------

    def set_url(self, url: str) -> "Suite":
        """Set the page URL for this suite."""
        if not isinstance(url, str):
            raise TypeError(f"URL must be a string, got {type(url).__name__}")
        self.url = url
        return self

    def set_capture_elements(self, *selectors: Union[str, List[str]]) -> "Suite":
        """
        Set the selectors captured for every state of this suite.

        Accepts selectors as separate arguments, as a list, or both. A later
        call replaces the selectors of an earlier one.

        Args:
            *selectors: Selector strings and/or lists of selector strings

        Raises:
            TypeError: Any selector is not a string
            SuiteConfigurationError: No selectors were given
        """
        flat: List[str] = []
        for item in selectors:
            if isinstance(item, (list, tuple)):
                flat.extend(item)
            else:
                flat.append(item)

        for selector in flat:
            if not isinstance(selector, str):
                raise TypeError(
                    f"Selector must be a string, got {type(selector).__name__}"
                )
        if not flat:
            raise SuiteConfigurationError("At least one capture selector is required")

        self.capture_selectors = flat
        return self

    def before(self, hook: Callable) -> "Suite":
        """Set the setup hook run before the states are activated."""
        if not callable(hook):
            raise TypeError(f"Before hook must be callable, got {type(hook).__name__}")
        self.before_hook = hook
        return self

    def capture(self, name: str, callback: Optional[StateCallback] = None) -> "Suite":
        """
        Register a named capture state.

        Args:
            name: State name
            callback: Optional ``callback(browser, context)`` run on activation

        Raises:
            TypeError: name is not a string or callback is not callable
        """
        if not isinstance(name, str):
            raise TypeError(f"State name must be a string, got {type(name).__name__}")
        if callback is not None and not callable(callback):
            raise TypeError(
                f"State callback must be callable, got {type(callback).__name__}"
            )

        if warn_duplicate_names() and any(state.name == name for state in self.states):
            logger.warning(f"Suite '{self.full_name}' already has a state named '{name}'")

        self.states.append(CaptureState(name, self, callback))
        logger.debug(f"Registered state '{name}' in suite '{self.full_name}'")
        return self

    def skip(self, browsers: SkipArgument = None) -> "Suite":
        """
        Mark the suite as skipped, everywhere or for specific browsers.

        Examples:
            suite.skip()                                   # never run
            suite.skip("opera")
            suite.skip({"name": "chrome", "version": "42"})
            suite.skip(["opera", {"name": "firefox"}])
        """
        self.skipped = normalize_skip_browsers(browsers)
        if self.skipped is True:
            logger.debug(f"Suite '{self.full_name}' skipped in all browsers")
        else:
            logger.debug(
                f"Suite '{self.full_name}' skipped in: "
                f"{[browser.to_dict() for browser in self.skipped]}"
            )
        return self

    # ------------------------------------------------------------------
    # Read-only helpers
    # ------------------------------------------------------------------

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def has_states(self) -> bool:
        return bool(self.states)

    @property
    def path(self) -> List[str]:
        """Names from the top-level suite down to this one (root excluded)."""
        names = []
        node = self
        while node is not None and not node.is_root:
            names.append(node.name)
            node = node.parent
        return list(reversed(names))

    @property
    def full_name(self) -> str:
        return " ".join(self.path)

    def walk(self) -> Iterator["Suite"]:
        """Yield this suite and all descendants, depth first, in declaration order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def should_skip(self, browser: Any) -> bool:
        """
        Check whether this suite must not run in ``browser``.

        Args:
            browser: Browser name, mapping or object with ``name``/``version``
        """
        if self.skipped is None:
            return False
        if self.skipped is True:
            return True
        return any(descriptor.matches(browser) for descriptor in self.skipped)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data snapshot of this suite and its descendants."""
        if isinstance(self.skipped, list):
            skipped = [descriptor.to_dict() for descriptor in self.skipped]
        else:
            skipped = self.skipped

        return {
            "name": self.name,
            "url": self.url,
            "capture_selectors": (
                list(self.capture_selectors) if self.capture_selectors is not None else None
            ),
            "skipped": skipped,
            "states": [state.name for state in self.states],
            "children": [child.to_dict() for child in self.children],
        }

    def __repr__(self) -> str:
        return f"Suite(name={self.name!r}, children={len(self.children)}, states={len(self.states)})"


__all__ = [
    "Suite",
]
