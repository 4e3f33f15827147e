"""
================================================================================
Framework Exceptions
================================================================================

Errors raised while authoring suites.

Wrong argument types are reported with the builtin ``TypeError``. The class
below covers arguments that have the right shape but are incomplete, such as
a skip rule without a browser name.

Author: Automation Team
License: MIT
================================================================================
"""


class SuiteConfigurationError(Exception):
    """Raised when a builder argument is well-typed but semantically incomplete."""
    pass


__all__ = [
    "SuiteConfigurationError",
]
