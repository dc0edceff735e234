"""Typed failures raised while turning an uploaded document into chunks."""
from __future__ import annotations

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Classification of pipeline failures."""

    UNSUPPORTED_FORMAT = "unsupported_format"
    CORRUPT_DOCUMENT = "corrupt_document"
    EXTRACTION_ERROR = "extraction_error"
    INVALID_CONFIGURATION = "invalid_configuration"

    @property
    def is_client_error(self) -> bool:
        """Whether the failure was caused by the caller's input."""

        return self in (ErrorKind.UNSUPPORTED_FORMAT, ErrorKind.INVALID_CONFIGURATION)


class DocumentProcessingError(RuntimeError):
    """Base class for every failure produced by the ingest pipeline."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.__cause__ = cause


class UnsupportedFormatError(DocumentProcessingError):
    """Raised when neither the MIME type nor the filename identify a known format."""

    kind = ErrorKind.UNSUPPORTED_FORMAT


class CorruptDocumentError(DocumentProcessingError):
    """Raised when the bytes cannot be opened as the detected format."""

    kind = ErrorKind.CORRUPT_DOCUMENT


class ExtractionError(DocumentProcessingError):
    """Raised when a well-formed document fails during content extraction."""

    kind = ErrorKind.EXTRACTION_ERROR


class InvalidConfigurationError(DocumentProcessingError):
    """Raised when chunking parameters cannot produce a forward-moving window."""

    kind = ErrorKind.INVALID_CONFIGURATION
