"""Custom exception hierarchy for kitsu-manga.

Every failure of a lookup maps to one of these types, so the command layer
can report it with a single ``except KitsuMangaError`` and tests can assert
on the precise cause.
"""


class KitsuMangaError(Exception):
    """Base exception for all kitsu-manga errors."""

    pass


class TransportError(KitsuMangaError):
    """Raised when the HTTP request itself cannot complete (DNS, refused, timeout)."""

    def __init__(self, cause: object):
        super().__init__(f"HTTP request failed: {cause}")
        self.cause = cause


class UnexpectedStatusError(KitsuMangaError):
    """Raised when the Kitsu API answers with anything other than 200."""

    def __init__(self, status_code: int):
        super().__init__(f"Kitsu API returned status {status_code}")
        self.status_code = status_code


class EmptyBodyError(KitsuMangaError):
    """Raised when the response body has zero length."""

    def __init__(self):
        super().__init__("empty response from Kitsu API")


class MalformedPayloadError(KitsuMangaError):
    """Raised when the body is not JSON or does not fit the response schema."""

    def __init__(self, cause: object):
        super().__init__(f"failed to parse JSON: {cause}")
        self.cause = cause


class ConfigError(KitsuMangaError):
    """Raised when configuration is invalid."""

    pass
