import logging

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from doc_extract.api.extract import router as extract_router
from doc_extract.config import get_settings
from doc_extract.heartbeat import Heartbeat
from doc_extract.logging_config import configure_logging

_settings = get_settings()
configure_logging(_settings.log_dir, _settings.log_level)

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="Document Text Extractor")
app.include_router(extract_router)
app.state.heartbeat = None


@app.on_event("startup")
async def _start_heartbeat() -> None:
    """Schedule the heartbeat when enabled through the environment."""

    settings = get_settings()
    if not settings.heartbeat_enabled:
        LOGGER.info("Heartbeat disabled")
        return
    heartbeat = Heartbeat(settings.heartbeat_interval_seconds, collect_garbage=settings.heartbeat_gc)
    heartbeat.start()
    app.state.heartbeat = heartbeat


@app.on_event("shutdown")
async def _stop_heartbeat() -> None:
    heartbeat = app.state.heartbeat
    app.state.heartbeat = None
    if heartbeat is not None:
        await heartbeat.stop()


@app.get("/", response_class=PlainTextResponse)
def read_root() -> str:
    """Healthcheck endpoint for the service."""
    return "Text extractor running"
