"""Errors raised while reading Azure settings sources."""

from __future__ import annotations


class AzureSettingsError(Exception):
    """Raised when a configuration source cannot be read.

    The default context/environment resolution never raises this.
    """

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code
