"""
Custom Exception Classes for the Club Mareva Content Layer

This module defines custom exceptions for better error handling and
categorization of failures across the content sources.
"""

from typing import Any, Optional


class ContentError(Exception):
    """Base exception for all content layer errors."""
    pass


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(ContentError):
    """Raised when configuration validation fails or required settings are missing."""
    pass


# =============================================================================
# Content Source Errors
# =============================================================================

class ContentSourceError(ContentError):
    """Base exception for errors raised while reading a content source."""
    pass


class ApiError(ContentSourceError):
    """Raised when the content API answers with a non-2xx status or `success: false`.

    Attributes:
        status: HTTP status code (400 for an envelope with `success: false`).
        status_text: HTTP reason phrase or a short description.
        details: Structured error payload from the envelope, if any.
    """

    def __init__(self, status: int, status_text: str, details: Optional[Any] = None):
        self.status = status
        self.status_text = status_text
        self.details = details
        super().__init__(f"API Error: {status} {status_text}")


class ApiTransportError(ContentSourceError):
    """Raised when the content API cannot be reached or returns unreadable JSON."""
    pass


class FilesystemStoreError(ContentSourceError):
    """Raised when a directory or file of the local content store cannot be read."""
    pass


# =============================================================================
# Form Errors
# =============================================================================

class FormSubmissionError(ContentError):
    """Raised when a validated form cannot be delivered to the backend."""
    pass
