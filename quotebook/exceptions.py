"""
Custom exceptions for the quotebook package.
"""
from typing import Dict, List


class QuotebookError(Exception):
    """Base exception for the quotebook package."""
    pass


class StorageError(QuotebookError):
    """Raised when a stored collection cannot be read back or written."""
    pass


class FormValidationError(QuotebookError):
    """
    Raised by the form parser when submitted values are invalid.

    Every problem found is collected in ``errors`` keyed by field path
    (e.g. ``items[0].quantity``) so callers can report all of them at once.
    """

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        summary = "; ".join(
            f"{field}: {', '.join(messages)}" for field, messages in errors.items()
        )
        super().__init__(f"Invalid form data - {summary}")
