from collections.abc import Mapping
from typing import Any, Self
from urllib.parse import unquote

import httpx

from muzzle.assertions import (
    assert_equals,
    assert_has_key,
    assert_matches,
    assert_not_has_key,
    assert_subset,
    assert_true,
    format_value,
    matches_wildcard,
)
from muzzle.messages.content import ContentAssertions

__all__ = ["AssertableRequest", "normalize_query", "parse_query"]


def parse_query(query: str | bytes) -> dict[str, Any]:
    """Parse a query string into a dict; repeated keys collect into a list."""
    params = httpx.QueryParams(query.decode("ascii") if isinstance(query, bytes) else query)
    parsed: dict[str, Any] = {}
    for key in params.keys():
        values = params.get_list(key)
        parsed[key] = values[0] if len(values) == 1 else values
    return parsed


def normalize_query(values: Mapping[str, Any]) -> dict[str, Any]:
    """Render ``values`` the way httpx encodes them, so ``2`` compares equal to ``"2"``."""
    return parse_query(str(httpx.QueryParams(values)))


class AssertableRequest(ContentAssertions, httpx.Request):
    """An ``httpx.Request`` with chainable assertions over its method, URI, headers and body."""

    message_label = "request"

    @classmethod
    def from_base_request(cls, request: httpx.Request) -> "AssertableRequest":
        """Decorate an existing request, keeping its method, URL, headers, body and extensions."""
        if isinstance(request, cls):
            return request
        return cls(
            request.method,
            request.url,
            headers=request.headers,
            stream=request.stream,
            extensions=request.extensions,
        )

    def json(self) -> Any:
        return self._decoded_json()

    @property
    def request_target(self) -> str:
        return self.url.raw_path.decode("ascii")

    @property
    def user_info(self) -> str:
        return self.url.userinfo.decode("ascii")

    @property
    def authority(self) -> str:
        authority = self.url.host
        if ":" in authority:
            authority = f"[{authority}]"
        if self.user_info:
            authority = f"{self.user_info}@{authority}"
        if self.url.port is not None:
            authority = f"{authority}:{self.url.port}"
        return authority

    @property
    def query_string(self) -> str:
        return self.url.query.decode("ascii")

    def query_params(self) -> dict[str, Any]:
        return parse_query(self.url.query)

    def assert_request_target(self, target: str) -> Self:
        assert_equals(target, self.request_target)
        return self

    def assert_method(self, method: str) -> Self:
        expected = method.upper()
        assert_equals(
            expected,
            self.method,
            f"Expected HTTP method [{expected}]. Got [{self.method}] "
            f"for request to {unquote(str(self.url))}.",
        )
        return self

    def assert_uri_scheme(self, scheme: str) -> Self:
        assert_equals(scheme, self.url.scheme)
        return self

    def assert_uri_authority(self, authority: str) -> Self:
        assert_equals(authority, self.authority)
        return self

    def assert_uri_user_info(self, user_info: str) -> Self:
        assert_equals(user_info, self.user_info)
        return self

    def assert_uri_host(self, host: str) -> Self:
        assert_equals(host, self.url.host)
        return self

    def assert_uri_port(self, port: int | None = None) -> Self:
        assert_equals(port, self.url.port)
        return self

    def assert_uri_path(self, pattern: str) -> Self:
        """Assert the URI path matches ``pattern``; an asterisk (*) matches anything."""
        assert_true(
            matches_wildcard(pattern, self.url.path),
            f"The path [{unquote(self.url.path)}] does not match the expected pattern [{pattern}].",
        )
        return self

    def assert_uri_path_matches(self, pattern: str) -> Self:
        """Assert the URI path matches the regular expression ``pattern``."""
        assert_matches(
            pattern,
            self.url.path,
            f"The path [{unquote(self.url.path)}] does not match the expected pattern [{pattern}].",
        )
        return self

    def assert_uri_fragment(self, fragment: str) -> Self:
        assert_equals(fragment, self.url.fragment)
        return self

    def assert_uri_query(self, query: str) -> Self:
        assert_equals(query, self.query_string)
        return self

    def assert_uri_query_has_key(self, key: str) -> Self:
        assert_has_key(key, self.query_params())
        return self

    def assert_uri_query_not_has_key(self, key: str) -> Self:
        query = self.query_params()
        assert_not_has_key(
            key,
            query,
            f"Found [{key}] in the query parameters: {format_value(query)}",
        )
        return self

    def assert_uri_query_contains(self, values: Mapping[str, Any]) -> Self:
        """Assert the query contains ``values``; scalars compare by their encoded form."""
        expected = normalize_query(values)
        query = self.query_params()
        assert_subset(
            expected,
            query,
            f"Could not find\n{format_value(expected)}\nwithin response\n{format_value(query)}\n",
        )
        return self

    def assert_uri_equals(self, url: httpx.URL | str) -> Self:
        expected = httpx.URL(url)
        assert_equals(
            expected,
            self.url,
            f"Failed asserting {unquote(str(self.url))} equals {unquote(str(expected))}",
        )
        return self
