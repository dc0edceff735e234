import json
import logging

from doc_extract.logging_config import MinimalJSONFormatter


def _record(msg, **extra) -> logging.LogRecord:
    record = logging.LogRecord("doc_extract.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_plain_message_with_extras() -> None:
    payload = json.loads(MinimalJSONFormatter().format(_record("hello", event="heartbeat")))

    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["module"] == "doc_extract.test"
    assert payload["event"] == "heartbeat"
    assert payload["ts"].endswith("Z")


def test_dict_messages_are_merged() -> None:
    payload = json.loads(MinimalJSONFormatter().format(_record({"filename": "a.pdf", "chunks": 2})))

    assert payload["filename"] == "a.pdf"
    assert payload["chunks"] == 2
    assert "message" not in payload
