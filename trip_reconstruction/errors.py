"""Typed errors surfaced by the import operations.

Only structural failures are raised. Defects inside a single record are
absorbed during normalization and never reach the caller.
"""

from __future__ import annotations

from typing import Optional


class TripImportError(ValueError):
    """Base error for trip import."""


class ImportParseError(TripImportError):
    """The input could not be read as a whole (bad JSON, no header row, ...)."""

    def __init__(self, message: str, source_format: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.source_format = source_format
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message
