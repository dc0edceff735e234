"""Extractors for supported document types."""
from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from typing import Iterator, List

from docx import Document as load_docx
from docx.table import Table
from docx.text.paragraph import Paragraph
from PyPDF2 import PageObject, PdfReader

from doc_extract.errors import CorruptDocumentError, ExtractionError

LOGGER = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n"
PAGE_SEPARATOR = "\n"


class Extractor(ABC):
    """Turns the raw bytes of one document format into plain text."""

    @abstractmethod
    def extract_text(self, data: bytes) -> str:
        """Return the document's text or raise a typed processing error."""


class DocxExtractor(Extractor):
    """Extract text from Microsoft Word documents.

    Paragraphs are emitted in reading order, including those nested in table
    cells, and joined with a single newline. Empty paragraphs are skipped.
    """

    def extract_text(self, data: bytes) -> str:
        try:
            document = load_docx(io.BytesIO(data))
        except Exception as error:
            raise CorruptDocumentError(f"Not a valid DOCX package: {error}", cause=error) from error

        try:
            paragraphs = [text for text in self._iter_paragraph_text(document) if text]
        except Exception as error:
            raise ExtractionError(f"Failed to read DOCX content: {error}", cause=error) from error

        text = PARAGRAPH_SEPARATOR.join(paragraphs)
        LOGGER.debug("Extracted %s paragraphs (%s chars) from DOCX", len(paragraphs), len(text))
        return text

    def _iter_paragraph_text(self, container) -> Iterator[str]:
        for block in container.iter_inner_content():
            if isinstance(block, Paragraph):
                yield block.text
            elif isinstance(block, Table):
                yield from self._iter_table_text(block)

    def _iter_table_text(self, table: Table) -> Iterator[str]:
        # Merged cells are reported once per grid position they span.
        seen = set()
        for row in table.rows:
            for cell in row.cells:
                if cell._tc in seen:
                    continue
                seen.add(cell._tc)
                yield from self._iter_paragraph_text(cell)


class PdfExtractor(Extractor):
    """Extract text from PDF documents page by page.

    Pages are read strictly in order because the reader keeps per-document
    parse state. Each page's text items are joined with a space and followed
    by a newline. The first failing page aborts the whole extraction.
    """

    def extract_text(self, data: bytes) -> str:
        pages = self._open(data)
        parts: List[str] = []
        for page_number, page in enumerate(pages, start=1):
            try:
                page_text = page.extract_text() or ""
            except Exception as error:
                raise ExtractionError(
                    f"Failed to extract text from PDF page {page_number}: {error}", cause=error
                ) from error
            items = [item for item in page_text.splitlines() if item]
            parts.append(" ".join(items) + PAGE_SEPARATOR)
        text = "".join(parts)
        LOGGER.debug("Extracted %s pages (%s chars) from PDF", len(parts), len(text))
        return text

    def _open(self, data: bytes) -> List[PageObject]:
        try:
            reader = PdfReader(io.BytesIO(data))
            if reader.is_encrypted and not reader.decrypt(""):
                raise CorruptDocumentError("PDF is password protected")
            # Walk the whole page tree so broken documents fail here.
            pages = list(reader.pages)
        except CorruptDocumentError:
            raise
        except Exception as error:
            raise CorruptDocumentError(f"Unable to open PDF: {error}", cause=error) from error
        LOGGER.debug("Opened PDF with %s pages", len(pages))
        return pages
