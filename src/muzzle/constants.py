from enum import StrEnum
from http import HTTPStatus

__all__ = [
    "DEFAULT_CAPTURE_TIMEOUT",
    "DEFAULT_CAPTURE_WAIT",
    "DEFAULT_FIXTURE_ENCODING",
    "FIXTURE_CONTENT_TYPES",
    "HTML_EXTENSIONS",
    "JSON_EXTENSIONS",
    "HttpMethod",
    "HttpStatus",
]

HttpStatus = HTTPStatus
"""Status codes, re-exported so tests read ``HttpStatus.CREATED``."""


class HttpMethod(StrEnum):
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"


JSON_EXTENSIONS: tuple[str, ...] = (".json",)
HTML_EXTENSIONS: tuple[str, ...] = (".html", ".htm")

FIXTURE_CONTENT_TYPES = {
    "json": "application/json",
    "html": "text/html; charset=utf-8",
    "text": "text/plain; charset=utf-8",
}

DEFAULT_FIXTURE_ENCODING = "utf-8"
DEFAULT_CAPTURE_TIMEOUT = 10.0
DEFAULT_CAPTURE_WAIT = 1.0
