"""Custom exception hierarchy for cv-assistant."""

from __future__ import annotations


class CVAssistantError(Exception):
    """Base exception for all cv-assistant errors."""


class NoProfileError(CVAssistantError):
    """Raised when a question is asked before any profile was extracted."""


class UnsupportedFormatError(CVAssistantError):
    """Raised when a document is neither PDF nor plain text."""


class InvalidFileError(CVAssistantError):
    """Raised when the input file is missing or cannot be decoded."""


class ScannedPDFError(CVAssistantError):
    """Raised when a PDF has no text layer (scanned/image-only)."""


class EncryptedPDFError(CVAssistantError):
    """Raised when a PDF is password-protected."""


class EmailDeliveryError(CVAssistantError):
    """Raised when email sending fails."""


class EmailNotConfiguredError(EmailDeliveryError):
    """Raised when SMTP credentials are missing."""
