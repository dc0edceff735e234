"""API router exposing the document extraction endpoint."""
from __future__ import annotations

import logging
import secrets
import time
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Header, HTTPException, UploadFile
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from doc_extract.config import Settings, get_settings
from doc_extract.errors import InvalidConfigurationError
from doc_extract.ingest.chunking import ChunkingConfig
from doc_extract.ingest.models import SourceDocument
from doc_extract.ingest.pipeline import IngestPipeline, PipelineFailure
from doc_extract.logging_config import AUDIT_LOGGER_NAME

LOGGER = logging.getLogger(__name__)
AUDIT_LOGGER = logging.getLogger(AUDIT_LOGGER_NAME)

router = APIRouter(tags=["extract"])


class ExtractResponse(BaseModel):
    """Response body returned from the extract endpoint."""

    success: bool
    filename: str
    characters: int
    chunk_count: int
    chunks: list[str]


def require_api_key(
    x_api_key: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Reject the request unless ``X-API-Key`` matches the configured secret."""

    if not settings.api_key or x_api_key is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    if not secrets.compare_digest(x_api_key.encode(), settings.api_key.encode()):
        raise HTTPException(status_code=401, detail="Unauthorized")


async def _read_upload(upload: UploadFile, limit: int) -> bytes:
    data = await upload.read(limit + 1)
    if len(data) > limit:
        raise HTTPException(status_code=413, detail=f"File exceeds the {limit} byte upload limit")
    return data


def _audit(filename: str | None, status: int, started: float, **fields: object) -> None:
    AUDIT_LOGGER.info(
        {
            "event": "extract",
            "filename": filename,
            "status": status,
            "duration_seconds": round(time.perf_counter() - started, 4),
            **fields,
        }
    )


def _parse_form_int(name: str, value: Optional[str], default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError as error:
        raise InvalidConfigurationError(f"{name} must be an integer, got {value!r}", cause=error) from error


@router.post(
    "/extract",
    response_model=ExtractResponse,
    dependencies=[Depends(require_api_key)],
)
async def extract_document(
    file: Optional[UploadFile] = File(None),
    chunk_size: Optional[str] = Form(None),
    overlap: Optional[str] = Form(None),
    settings: Settings = Depends(get_settings),
) -> ExtractResponse:
    """Extract, normalise and chunk the text of an uploaded DOCX or PDF."""

    started = time.perf_counter()
    filename = file.filename if file is not None else None
    try:
        response = await _extract(file, chunk_size, overlap, settings)
    except HTTPException as exc:
        _audit(filename, exc.status_code, started, error=exc.detail)
        raise
    _audit(
        response.filename,
        200,
        started,
        characters=response.characters,
        chunks=response.chunk_count,
    )
    return response


async def _extract(
    file: Optional[UploadFile],
    chunk_size: Optional[str],
    overlap: Optional[str],
    settings: Settings,
) -> ExtractResponse:
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    try:
        config = ChunkingConfig(
            chunk_size=_parse_form_int("chunk_size", chunk_size, settings.chunk_size),
            overlap=_parse_form_int("overlap", overlap, settings.chunk_overlap),
        )
    except InvalidConfigurationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    data = await _read_upload(file, settings.max_upload_bytes)
    document = SourceDocument(
        content=data,
        declared_mime_type=file.content_type or "",
        filename=file.filename or "",
    )

    outcome = await run_in_threadpool(IngestPipeline(config).process, document)
    if isinstance(outcome, PipelineFailure):
        if outcome.kind.is_client_error:
            raise HTTPException(status_code=400, detail=outcome.message)
        LOGGER.error("Extraction failed for %s: %s", document.filename, outcome.message)
        raise HTTPException(status_code=500, detail="Extraction failed")

    result = outcome.result
    return ExtractResponse(
        success=True,
        filename=result.filename,
        characters=result.total_characters,
        chunk_count=result.chunk_count,
        chunks=[chunk.content for chunk in result.chunks],
    )
