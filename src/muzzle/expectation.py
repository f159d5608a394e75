from collections.abc import Callable, Mapping
from typing import Any, Self

import httpx

from muzzle.assertions import assert_equals, format_value
from muzzle.messages.request import AssertableRequest, parse_query
from muzzle.messages.response import AssertableResponse
from muzzle.response_builder import ResponseBuilder

__all__ = ["Expectation", "RequestAssertion"]

RequestAssertion = Callable[[AssertableRequest], Any]


class Expectation:
    """
    A request matcher paired with the response to reply with.

    Unset parts are not checked, so an empty expectation accepts any request
    and replies ``200 OK``.
    """

    def __init__(self) -> None:
        self._method: str | None = None
        self._uri: httpx.URL | None = None
        self._query: dict[str, Any] = {}
        self._headers: dict[str, str | list[str]] = {}
        self._json: Any = None
        self._body: str | None = None
        self._assertions: list[RequestAssertion] = []
        self._reply: httpx.Response | None = None

    def method(self, method: str) -> Self:
        self._method = method.upper()
        return self

    def uri(self, uri: str | httpx.URL) -> Self:
        self._uri = httpx.URL(uri)
        return self

    def query(self, query: Mapping[str, Any]) -> Self:
        self._query.update(query)
        return self

    def headers(self, headers: Mapping[str, str | list[str]]) -> Self:
        self._headers.update(headers)
        return self

    def json(self, data: Any) -> Self:
        self._json = data
        return self

    def body(self, text: str) -> Self:
        self._body = text
        return self

    def should(self, assertion: RequestAssertion) -> Self:
        """Add a custom assertion called with the matched ``AssertableRequest``."""
        self._assertions.append(assertion)
        return self

    def reply_with(self, response: httpx.Response) -> Self:
        self._reply = response
        return self

    def expected_query(self) -> dict[str, Any]:
        query = parse_query(self._uri.query) if self._uri is not None else {}
        query.update(self._query)
        return query

    def assert_matches(self, request: AssertableRequest) -> None:
        """Run every configured assertion against ``request``."""
        if self._method is not None:
            request.assert_method(self._method)

        if self._uri is not None:
            self._assert_uri(request)

        query = self.expected_query()
        if query:
            request.assert_uri_query_contains(query)

        for name, value in self._headers.items():
            request.assert_header(name, value)

        if self._json is not None:
            request.assert_json(self._json)

        if self._body is not None:
            request.assert_see(self._body)

        for assertion in self._assertions:
            assertion(request)

    def _assert_uri(self, request: AssertableRequest) -> None:
        expected = self._uri
        if expected.scheme:
            request.assert_uri_scheme(expected.scheme)
        if expected.host:
            assert_equals(
                expected.host,
                request.url.host,
                f"Expected a request to host [{expected.host}]. Got [{request.url.host}].",
            )
            assert_equals(
                expected.port,
                request.url.port,
                f"Expected a request to port {format_value(expected.port)}. "
                f"Got {format_value(request.url.port)}.",
            )
        request.assert_uri_path(expected.path or "/")

    def reply(self) -> AssertableResponse:
        if self._reply is None:
            return ResponseBuilder().build()
        return AssertableResponse.from_base_response(self._reply)

    def __repr__(self) -> str:
        uri = str(self._uri) if self._uri is not None else "*"
        return f"Expectation({self._method or '*'} {uri})"
