"""High level ingestion pipeline entry point."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Union

from doc_extract.errors import DocumentProcessingError, ErrorKind, UnsupportedFormatError

from .chunking import ChunkingConfig, SlidingWindowChunker
from .extractors import DocxExtractor, Extractor, PdfExtractor
from .format_detection import DocumentFormat, DocumentFormatDetector
from .models import ExtractionResult, SourceDocument
from .normalization import normalize_text

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PipelineSuccess:
    result: ExtractionResult
    ok: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class PipelineFailure:
    error: DocumentProcessingError
    ok: ClassVar[bool] = False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def message(self) -> str:
        return str(self.error)


PipelineOutcome = Union[PipelineSuccess, PipelineFailure]


class IngestPipeline:
    """Pipeline orchestrating format detection, extraction, normalisation and chunking."""

    def __init__(self, config: Optional[ChunkingConfig] = None) -> None:
        self.config = config or ChunkingConfig()
        self.chunker = SlidingWindowChunker(self.config)
        self.extractors: Dict[DocumentFormat, Extractor] = {
            DocumentFormat.DOCX: DocxExtractor(),
            DocumentFormat.PDF: PdfExtractor(),
        }

    def process(self, document: SourceDocument) -> PipelineOutcome:
        """Run the pipeline and return a tagged success or failure."""

        try:
            return PipelineSuccess(self.run(document))
        except DocumentProcessingError as error:
            LOGGER.warning(
                "Processing %s failed with %s: %s", document.filename, error.kind.value, error
            )
            return PipelineFailure(error)

    def run(self, document: SourceDocument) -> ExtractionResult:
        """Run the pipeline, raising the typed error on the first failure."""

        document_format = DocumentFormatDetector.detect(document.declared_mime_type, document.filename)
        LOGGER.info("Processing file %s (%s)", document.filename, document_format.value)
        extractor = self.extractors.get(document_format)
        if extractor is None:
            raise UnsupportedFormatError(
                f"Unsupported file type: {document.filename!r} ({document.declared_mime_type or 'no MIME type'})"
            )

        raw_text = extractor.extract_text(document.content)
        text = normalize_text(raw_text)
        chunks = self.chunker.chunk(text)
        LOGGER.info("Generated %s chunks (%s chars) for file %s", len(chunks), len(text), document.filename)
        return ExtractionResult(
            filename=document.filename,
            total_characters=len(text),
            chunks=tuple(chunks),
        )


def process(document: SourceDocument, config: Optional[ChunkingConfig] = None) -> PipelineOutcome:
    """Convenience wrapper building a one-off :class:`IngestPipeline`."""

    return IngestPipeline(config).process(document)
