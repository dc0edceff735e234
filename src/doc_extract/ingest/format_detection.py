"""Utilities for detecting the format of uploaded documents."""
from __future__ import annotations

from enum import Enum
from typing import Optional

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PDF_MIME_TYPE = "application/pdf"


class DocumentFormat(str, Enum):
    """Document formats recognised by the detector."""

    DOCX = "docx"
    PDF = "pdf"
    UNSUPPORTED = "unsupported"


class DocumentFormatDetector:
    """Detects the document format from the declared MIME type and file name."""

    _MIME_MAP = {
        DOCX_MIME_TYPE: DocumentFormat.DOCX,
        PDF_MIME_TYPE: DocumentFormat.PDF,
    }
    _SUFFIX_MAP = (
        (".docx", DocumentFormat.DOCX),
        (".pdf", DocumentFormat.PDF),
    )

    @classmethod
    def detect(cls, mime_type: Optional[str], file_name: Optional[str]) -> DocumentFormat:
        """Return the detected document format.

        The declared MIME type wins when it is one of the canonical values.
        Generic or missing types fall back to a case-insensitive check of the
        file suffix. Anything else is :attr:`DocumentFormat.UNSUPPORTED`.
        """

        if mime_type and mime_type in cls._MIME_MAP:
            return cls._MIME_MAP[mime_type]

        lowered = (file_name or "").lower()
        for suffix, document_format in cls._SUFFIX_MAP:
            if lowered.endswith(suffix):
                return document_format
        return DocumentFormat.UNSUPPORTED
