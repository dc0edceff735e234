"""Extraction, normalisation and chunking of uploaded documents."""
from __future__ import annotations

from .chunking import ChunkingConfig, SlidingWindowChunker, chunk_text
from .format_detection import DocumentFormat, DocumentFormatDetector
from .models import Chunk, ExtractionResult, SourceDocument
from .normalization import normalize_text
from .pipeline import IngestPipeline, PipelineFailure, PipelineOutcome, PipelineSuccess, process

__all__ = [
    "Chunk",
    "ChunkingConfig",
    "DocumentFormat",
    "DocumentFormatDetector",
    "ExtractionResult",
    "IngestPipeline",
    "PipelineFailure",
    "PipelineOutcome",
    "PipelineSuccess",
    "SlidingWindowChunker",
    "SourceDocument",
    "chunk_text",
    "normalize_text",
    "process",
]
