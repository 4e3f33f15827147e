"""
================================================================================
Capture State
================================================================================

A named point inside a suite at which the runner takes a capture.

The optional callback prepares the page (clicks, hovers, typing) through the
browser the runner hands in. Activation only reads the state, so one state
can be activated for many browsers.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol

if TYPE_CHECKING:
    from .suite import Suite


class ActionSequence(Protocol):
    """Queued browser actions, executed by ``perform``."""

    def perform(self) -> Any:
        ...


class Browser(Protocol):
    """The part of a browser session capture callbacks rely on."""

    def create_action_sequence(self) -> ActionSequence:
        ...


StateCallback = Callable[[Browser, Any], Any]


class CaptureState:
    """
    Named capture point registered with ``Suite.capture``.

    Attributes:
        name: State name, shown in reports and used for reference images
        suite: The suite whose ``capture`` call created this state
        callback: Optional user code run on activation
    """

    def __init__(
        self,
        name: str,
        suite: "Suite",
        callback: Optional[StateCallback] = None,
    ):
        self.name = name
        self.suite = suite
        self.callback = callback

    def activate(self, browser: Browser, context: Any) -> Any:
        """
        Run the state's callback against a browser.

        Args:
            browser: Browser session exposing ``create_action_sequence``
            context: Runner-specific data passed through to the callback

        Returns:
            Whatever the callback returns, or None when there is no callback
        """
        if self.callback is None:
            return None
        return self.callback(browser, context)

    def __repr__(self) -> str:
        return f"CaptureState(name={self.name!r}, suite={self.suite.full_name!r})"


__all__ = [
    "ActionSequence",
    "Browser",
    "CaptureState",
    "StateCallback",
]
