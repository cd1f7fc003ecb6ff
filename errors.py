"""
Exceptions raised by the document analysis pipeline.

Every error carries the HTTP status code and the message shown to the
caller. Anything diagnostic (raw model output, library errors) goes into
``details`` and is only ever logged.
"""

from typing import Any, Dict, Optional


class AnalysisError(Exception):
    """Base exception for all analysis pipeline errors."""

    status_code = 500
    default_message = "Failed to analyze document."

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Input Errors
# =============================================================================


class MissingInput(AnalysisError):
    """No file was supplied with the request."""

    status_code = 400
    default_message = "No file uploaded."


class UnsupportedFormat(AnalysisError):
    """Declared MIME type is neither PDF nor DOCX."""

    status_code = 400
    default_message = "Unsupported file type. Please upload a PDF or DOCX."


class FileTooLarge(AnalysisError):
    """Upload exceeds the configured maximum size."""

    status_code = 413
    default_message = "File too large."


class ExtractionFailure(AnalysisError):
    """The document could not be opened or read."""

    status_code = 400
    default_message = "Could not read the uploaded document."


class EmptyExtraction(AnalysisError):
    """Extraction succeeded but produced no text."""

    status_code = 400
    default_message = "Could not extract text from the document."


# =============================================================================
# Model Errors
# =============================================================================


class ModelCallFailure(AnalysisError):
    """The call to the generative model failed (network, auth, quota)."""


class ResponseParseError(AnalysisError):
    """The model reply could not be turned into a structured analysis."""


class NoJsonFound(ResponseParseError):
    """The model reply contains no JSON object."""


class InvalidJsonFormat(ResponseParseError):
    """The JSON object in the model reply could not be parsed."""


# =============================================================================
# Lookup Errors
# =============================================================================


class NotFound(AnalysisError):
    """No analysis is stored under the requested identifier."""

    status_code = 404
    default_message = "Analysis not found."
