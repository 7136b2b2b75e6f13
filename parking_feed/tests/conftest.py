"""Shared fixtures: sample channel feed payloads and a loguru capture sink."""

import copy
import json

import httpx
import pytest
from loguru import logger


SAMPLE_FEED = {
    "channel": {
        "id": 744337,
        "name": "Parcare",
        "field1": "Loc 1",
        "field2": "Loc 2",
        "field3": "Loc 3",
        "last_entry_id": 42,
    },
    "feeds": [
        {
            "created_at": "2019-04-02T11:45:00Z",
            "entry_id": 41,
            "field1": "0",
            "field2": "1",
            "field3": "1",
        },
        {
            "created_at": "2019-04-02T11:46:10Z",
            "entry_id": 42,
            "field1": "1",
            "field2": "0",
            "field3": "12.5",
        },
    ],
}


@pytest.fixture
def sample_feed() -> dict:
    return copy.deepcopy(SAMPLE_FEED)


@pytest.fixture
def feed_json(sample_feed) -> str:
    return json.dumps(sample_feed)


@pytest.fixture
def feed_file(tmp_path, feed_json):
    path = tmp_path / "feed.json"
    path.write_text(feed_json, encoding="utf-8")
    return path


@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def recording_transport():
    """MockTransport factory that remembers every request it served."""

    def factory(handler):
        seen = []

        def wrapped(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        transport = httpx.MockTransport(wrapped)
        transport.requests = seen
        return transport

    return factory
