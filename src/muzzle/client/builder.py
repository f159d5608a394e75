from collections.abc import Mapping
from typing import Any, Self

import httpx

from muzzle.constants import HttpMethod
from muzzle.exceptions import MuzzleError
from muzzle.expectation import Expectation, RequestAssertion

from .muzzle import Muzzle

__all__ = ["MuzzleBuilder"]


class MuzzleBuilder:
    """
    Fluent construction of a ``Muzzle`` client.

    Each verb method starts a new expectation; the other methods configure
    the most recent one.

    Example:
        client = (
            Muzzle.builder()
            .post("https://example.com")
            .reply_with(httpx.Response(201))
            .get("https://example.com")
            .query({"foo": "bar"})
            .build()
        )
    """

    def __init__(self) -> None:
        self.expectations: list[Expectation] = []

    def expect(self, method: str, uri: str | httpx.URL) -> Self:
        self.expectations.append(Expectation().method(method).uri(uri))
        return self

    def get(self, uri: str | httpx.URL) -> Self:
        return self.expect(HttpMethod.GET, uri)

    def head(self, uri: str | httpx.URL) -> Self:
        return self.expect(HttpMethod.HEAD, uri)

    def post(self, uri: str | httpx.URL) -> Self:
        return self.expect(HttpMethod.POST, uri)

    def put(self, uri: str | httpx.URL) -> Self:
        return self.expect(HttpMethod.PUT, uri)

    def patch(self, uri: str | httpx.URL) -> Self:
        return self.expect(HttpMethod.PATCH, uri)

    def delete(self, uri: str | httpx.URL) -> Self:
        return self.expect(HttpMethod.DELETE, uri)

    def options(self, uri: str | httpx.URL) -> Self:
        return self.expect(HttpMethod.OPTIONS, uri)

    def _current(self) -> Expectation:
        if not self.expectations:
            raise MuzzleError("Start an expectation with get(), post() or another verb first.")
        return self.expectations[-1]

    def query(self, query: Mapping[str, Any]) -> Self:
        self._current().query(query)
        return self

    def headers(self, headers: Mapping[str, str | list[str]]) -> Self:
        self._current().headers(headers)
        return self

    def json(self, data: Any) -> Self:
        self._current().json(data)
        return self

    def body(self, text: str) -> Self:
        self._current().body(text)
        return self

    def should(self, assertion: RequestAssertion) -> Self:
        self._current().should(assertion)
        return self

    def reply_with(self, response: httpx.Response) -> Self:
        self._current().reply_with(response)
        return self

    def build(self, config: Mapping[str, Any] | None = None, **options: Any) -> Muzzle:
        return Muzzle(config, **options).append(*self.expectations)
