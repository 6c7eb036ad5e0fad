"""
Domain exceptions for vgsuppress.

All library errors inherit from VgSuppressError.
"""


class VgSuppressError(Exception):
    """Base class for all vgsuppress exceptions."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.context = context or {}
