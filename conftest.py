"""
Repository-level pytest configuration.

Why this exists:
  - Keep the repository root importable so `capture_suites` resolves without install
  - Provide predictable environment defaults for local and CI runs

Values set here only apply when the user/CI has not set them already.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _authoring_env_defaults() -> Generator[None, None, None]:
    """Set environment defaults for the test session if not already provided."""
    defaults = {
        "LOGGING_LEVEL": "DEBUG",
        "AUTHORING_WARN_DUPLICATE_NAMES": "true",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
