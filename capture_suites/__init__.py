"""
Capture suites package.

Authoring DSL for visual regression suites:
  - `capture_suites.framework` builds the in-memory suite tree
  - `capture_suites.common` holds configuration and logging setup
  - `capture_suites.unit` contains the package's own tests

Example:
    from capture_suites.framework import AuthoringSession

    session = AuthoringSession()
    session.suite("header", lambda suite: suite.set_url("/").capture("plain"))
    root = session.finish()
"""

__version__ = "1.0.0"
