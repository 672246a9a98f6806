"""Kitsu API client.

Provides:
- build_search_url(): Query URL for a title search limited to one result
- decode_response(): JSON body -> KitsuMangaResponse
- KitsuClient: One blocking GET with a deadline and status/body checks
"""

import os
import time

import requests
from pydantic import ValidationError

from models.config import KitsuSettings, settings
from models.models import KitsuMangaResponse, MangaAttributes
from utils.exceptions import EmptyBodyError, MalformedPayloadError, TransportError, UnexpectedStatusError
from utils.logging import get_logger

logger = get_logger(__name__)

# Only the first match is ever shown
RESULT_LIMIT = 1
CHUNK_SIZE = 64 * 1024


def build_search_url(title: str, base_url: str | None = None) -> str:
    """Build the search URL for a manga title.

    The title is sent as its OS-level bytes, so arguments that are not
    valid UTF-8 are escaped byte for byte.

    Args:
        title: Free-text title to search for (non-empty)
        base_url: API base URL (defaults to the configured one)

    Returns:
        Fully-formed URL with ``filter[text]`` and ``page[limit]`` parameters

    Raises:
        ValueError: If title is empty
    """
    if not title:
        raise ValueError("search title must not be empty")

    base = (base_url or settings.kitsu.api_url).rstrip("/")
    request = requests.Request(
        "GET",
        f"{base}/manga",
        params={"filter[text]": os.fsencode(title), "page[limit]": RESULT_LIMIT},
    )
    return request.prepare().url


def decode_response(body: bytes) -> KitsuMangaResponse:
    """Parse a response body.

    Raises:
        MalformedPayloadError: If body is not JSON or does not match the schema
    """
    try:
        return KitsuMangaResponse.model_validate_json(body)
    except ValidationError as e:
        raise MalformedPayloadError(e) from e


class KitsuClient:
    """Synchronous Kitsu API client."""

    def __init__(self, config: KitsuSettings | None = None):
        """Initialize Kitsu client.

        Args:
            config: Kitsu settings (defaults to the global settings)
        """
        config = config or settings.kitsu
        self.base_url = config.api_url
        self.timeout = config.timeout_seconds

    def fetch(self, url: str) -> bytes:
        """Issue one GET and return the raw body.

        requests applies ``timeout`` to each socket read, so the body is read
        in chunks and checked against a total deadline as well; a slow
        server can overrun it by at most one read timeout. The response is
        closed on every exit path.

        Raises:
            TransportError: If the request or body read fails or the deadline passes
            UnexpectedStatusError: If status is not 200
            EmptyBodyError: If the body is empty
        """
        logger.debug(f"GET {url} (timeout={self.timeout}s)")
        deadline = time.monotonic() + self.timeout
        try:
            with requests.get(url, timeout=self.timeout, stream=True) as resp:
                if resp.status_code != 200:
                    raise UnexpectedStatusError(resp.status_code)
                chunks = []
                for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                    chunks.append(chunk)
                    if time.monotonic() > deadline:
                        raise TransportError(f"deadline of {self.timeout:g}s exceeded")
                body = b"".join(chunks)
        except requests.RequestException as e:
            raise TransportError(e) from e

        if not body:
            raise EmptyBodyError()

        logger.debug(f"Received {len(body)} bytes")
        return body

    def search_manga(self, title: str) -> MangaAttributes | None:
        """Search for a manga and return the first match.

        Args:
            title: Search title

        Returns:
            Attributes of the first result, or None if nothing matched

        Raises:
            KitsuMangaError: Any transport, status, body or decode failure
        """
        url = build_search_url(title, self.base_url)
        response = decode_response(self.fetch(url))
        record = response.first()
        if record is None:
            logger.debug(f"No results for {title!r}")
        return record
