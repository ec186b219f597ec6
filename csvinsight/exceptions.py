"""Domain exception classes for CSV Insight.

These exceptions are raised by service-layer code and translated into
HTTP error responses by exception handlers registered in ``main.py``.
"""

from __future__ import annotations


class MalformedInputError(Exception):
    """Raised when an uploaded CSV cannot be turned into a table."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(Exception):
    """Raised when a requested dataset does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UpstreamError(Exception):
    """Raised when the language model call fails or returns nothing usable."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
