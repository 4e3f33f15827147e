"""
================================================================================
Browser Descriptors
================================================================================

Skip rules name the browsers a suite must not run in. Authors may pass a
browser name, a mapping with ``name``/``version``, or a list of either; this
module normalizes all of those into ``BrowserDescriptor`` objects and matches
them against the browser a runner is about to use.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from .exceptions import SuiteConfigurationError


@dataclass(frozen=True)
class BrowserDescriptor:
    """
    A browser a skip rule applies to.

    Attributes:
        name: Browser name, e.g. "opera"
        version: Exact version string; None matches every version
    """
    name: str
    version: Optional[str] = None

    def matches(self, browser: Any) -> bool:
        """
        Check whether this descriptor covers the given browser.

        Args:
            browser: Browser name, mapping, BrowserDescriptor or any object
                     with ``name`` and optional ``version`` attributes

        Returns:
            True if names are equal and, when this descriptor carries a
            version, versions are equal too
        """
        name, version = _browser_identity(browser)
        if name != self.name:
            return False
        return self.version is None or self.version == version

    def to_dict(self) -> Dict[str, str]:
        """Plain-data form; ``version`` is present only when set."""
        data = {"name": self.name}
        if self.version is not None:
            data["version"] = self.version
        return data


SkipArgument = Union[None, str, Mapping[str, Any], BrowserDescriptor, list, tuple]


def _browser_identity(browser: Any) -> tuple:
    if isinstance(browser, str):
        return browser, None
    if isinstance(browser, Mapping):
        return browser.get("name"), browser.get("version")
    return getattr(browser, "name", None), getattr(browser, "version", None)


def _descriptor_from(value: Any) -> BrowserDescriptor:
    """Normalize one skip entry; lists are not accepted here."""
    if isinstance(value, BrowserDescriptor):
        return value

    if isinstance(value, str):
        return BrowserDescriptor(name=value)

    if isinstance(value, Mapping):
        if "name" not in value:
            raise SuiteConfigurationError(
                f"Browser to skip must have a name, got: {dict(value)!r}"
            )
        name = value["name"]
        if not isinstance(name, str):
            raise TypeError(
                f"Browser name must be a string, got {type(name).__name__}"
            )
        version = value.get("version")
        if version is not None and not isinstance(version, str):
            raise TypeError(
                f"Browser version must be a string, got {type(version).__name__}"
            )
        return BrowserDescriptor(name=name, version=version)

    raise TypeError(
        "Browser to skip must be a string or a mapping with a name, "
        f"got {type(value).__name__}"
    )


def normalize_skip_browsers(value: SkipArgument = None) -> Union[bool, List[BrowserDescriptor]]:
    """
    Convert a ``skip`` argument into its stored form.

    Args:
        value: None, a browser name, a mapping, a descriptor,
               or a list/tuple of those

    Returns:
        True for an unconditional skip, otherwise a non-empty list of
        BrowserDescriptor in argument order

    Raises:
        TypeError: An entry is neither a string nor a mapping, or a name or
                   version is not a string
        SuiteConfigurationError: A mapping has no name, or the list is empty
    """
    if value is None:
        return True

    if isinstance(value, (list, tuple)):
        if not value:
            raise SuiteConfigurationError("List of browsers to skip must not be empty")
        return [_descriptor_from(item) for item in value]

    return [_descriptor_from(value)]


__all__ = [
    "BrowserDescriptor",
    "SkipArgument",
    "normalize_skip_browsers",
]
