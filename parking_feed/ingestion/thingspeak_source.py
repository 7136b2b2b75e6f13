"""ThingSpeak channel feed source (single blocking GET)."""

from __future__ import annotations

from typing import Optional

import httpx

from parking_feed.core.config import settings
from parking_feed.core.logging import get_logger
from .base import BaseSource

log = get_logger("ingestion.thingspeak")


def create_url(string_url: Optional[str]) -> Optional[httpx.URL]:
    """Return a URL object for an absolute http(s) URL string, or None."""
    try:
        url = httpx.URL(string_url or "")
    except (httpx.InvalidURL, TypeError) as exc:
        log.opt(exception=exc).error(f"Problem building the URL {string_url!r}")
        return None

    if url.scheme not in ("http", "https") or not url.host:
        log.error(f"Problem building the URL {string_url!r}: expected an absolute http(s) URL")
        return None
    return url


def read_from_stream(response: httpx.Response) -> str:
    """Decode the body as UTF-8 and join its lines without terminators."""
    body = response.content.decode("utf-8")
    return "".join(body.splitlines())


def make_http_request(
    url: Optional[httpx.URL],
    transport: Optional[httpx.BaseTransport] = None,
) -> str:
    """GET the URL and return the body on a 200, an empty string otherwise."""
    if url is None:
        return ""

    timeout = httpx.Timeout(
        settings.HTTP_READ_TIMEOUT_SECONDS,
        connect=settings.HTTP_CONNECT_TIMEOUT_SECONDS,
    )
    try:
        with httpx.Client(timeout=timeout, transport=transport) as client:
            resp = client.get(url)
            if resp.status_code != 200:
                log.error(f"Error response code: {resp.status_code}")
                return ""
            return read_from_stream(resp)
    except httpx.HTTPError as exc:
        log.opt(exception=exc).error(f"Problem retrieving the parking feed JSON results from {url}")
    except UnicodeDecodeError as exc:
        log.opt(exception=exc).error(f"Feed response from {url} is not valid UTF-8")
    return ""


class ThingSpeakSource(BaseSource):
    """Fetches the channel feed JSON from a ThingSpeak-style endpoint."""

    name = "thingspeak"

    def __init__(self, request_url: str, transport: Optional[httpx.BaseTransport] = None):
        self.request_url = request_url
        self.transport = transport

    def fetch(self) -> str:
        url = create_url(self.request_url)
        body = make_http_request(url, transport=self.transport)
        if body:
            log.info(f"Fetched {len(body)} chars from {url}")
        return body
