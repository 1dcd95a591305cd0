"""Exception hierarchy for Bazaar.

Harness usage errors are programmer mistakes in test code and are never
caught. Data-access errors are what controllers translate into the error
envelope.
"""

from __future__ import annotations


class BazaarError(Exception):
    """Base class for all Bazaar errors."""


class HarnessError(BazaarError):
    """The test harness was used incorrectly."""


class UnknownMethodError(HarnessError):
    """A method outside the chainable whitelist was programmed."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Method {method} not found")


class DataAccessError(BazaarError):
    """A query against a model failed."""
