"""Sliding-window chunking of normalised text."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List

from doc_extract.errors import InvalidConfigurationError

from .models import Chunk

LOGGER = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 3000
DEFAULT_OVERLAP = 300


@dataclass(frozen=True, slots=True)
class ChunkingConfig:
    chunk_size: int = DEFAULT_CHUNK_SIZE
    overlap: int = DEFAULT_OVERLAP

    @property
    def step(self) -> int:
        return self.chunk_size - self.overlap


def validate_chunking(chunk_size: int, overlap: int) -> None:
    """Raise :class:`InvalidConfigurationError` unless the window can advance."""

    for name, value in (("chunk_size", chunk_size), ("overlap", overlap)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidConfigurationError(f"{name} must be an integer, got {value!r}")
    if chunk_size <= 0:
        raise InvalidConfigurationError(f"chunk_size must be positive, got {chunk_size}")
    if overlap < 0:
        raise InvalidConfigurationError(f"overlap must be non-negative, got {overlap}")
    if overlap >= chunk_size:
        raise InvalidConfigurationError(
            f"overlap ({overlap}) must be smaller than chunk_size ({chunk_size})"
        )


def iter_chunks(text: str, chunk_size: int, overlap: int) -> Iterator[Chunk]:
    """Yield overlapping windows of ``chunk_size`` characters.

    Consecutive windows start ``chunk_size - overlap`` characters apart. The
    last window is clamped to the end of ``text``, so it may be shorter than
    ``chunk_size`` and overlap its predecessor by more than ``overlap``.
    """

    validate_chunking(chunk_size, overlap)
    step = chunk_size - overlap
    text_length = len(text)
    index = 0
    start = 0
    while start < text_length:
        end = min(start + chunk_size, text_length)
        yield Chunk(index=index, start_offset=start, end_offset=end, content=text[start:end])
        index += 1
        start += step


def chunk_text(text: str, chunk_size: int = DEFAULT_CHUNK_SIZE, overlap: int = DEFAULT_OVERLAP) -> List[Chunk]:
    """Split *text* into overlapping chunks; empty text produces no chunks."""

    return list(iter_chunks(text, chunk_size, overlap))


class SlidingWindowChunker:
    """Split document text into fixed-size overlapping windows."""

    def __init__(self, config: ChunkingConfig | None = None) -> None:
        self.config = config or ChunkingConfig()

    def chunk(self, text: str) -> List[Chunk]:
        chunks = chunk_text(text, self.config.chunk_size, self.config.overlap)
        LOGGER.debug(
            "Split %s chars into %s chunks (chunk_size=%s, overlap=%s)",
            len(text),
            len(chunks),
            self.config.chunk_size,
            self.config.overlap,
        )
        return chunks
