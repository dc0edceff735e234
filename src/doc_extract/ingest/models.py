"""Data models used by the ingestion pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class SourceDocument:
    """Uploaded document as received from the caller."""

    content: bytes
    declared_mime_type: str
    filename: str


@dataclass(frozen=True, slots=True)
class Chunk:
    """A window of normalised text with its half-open offsets."""

    index: int
    start_offset: int
    end_offset: int
    content: str

    def __len__(self) -> int:
        return self.end_offset - self.start_offset


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Outcome of a successful pipeline run."""

    filename: str
    total_characters: int
    chunks: Tuple[Chunk, ...]

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)
