from http import HTTPStatus
from typing import Self

import httpx

from muzzle.assertions import assert_equals, assert_true
from muzzle.messages.content import ContentAssertions

__all__ = ["AssertableResponse"]


def _status_label(code: int) -> str:
    try:
        return f"{code} {HTTPStatus(code).phrase}"
    except ValueError:
        return str(code)


class AssertableResponse(ContentAssertions, httpx.Response):
    """An ``httpx.Response`` with chainable assertions over its status, headers and body."""

    message_label = "response"

    @classmethod
    def from_base_response(cls, response: httpx.Response) -> "AssertableResponse":
        """Decorate an existing response, keeping its status, headers, body and request."""
        if isinstance(response, cls):
            return response

        try:
            content = response.content
        except httpx.ResponseNotRead:
            decorated = cls(
                response.status_code,
                headers=response.headers,
                stream=response.stream,
                extensions=response.extensions,
            )
        else:
            # content is already decoded, so the encoding and length headers no longer apply
            headers = response.headers.copy()
            headers.pop("Content-Encoding", None)
            headers.pop("Content-Length", None)
            decorated = cls(
                response.status_code,
                headers=headers,
                content=content,
                extensions=response.extensions,
            )

        try:
            decorated.request = response.request
        except RuntimeError:
            pass
        return decorated

    def assert_status(self, status: int) -> Self:
        assert_equals(
            int(status),
            self.status_code,
            f"Expected status code {_status_label(int(status))} "
            f"but received {_status_label(self.status_code)}.",
        )
        return self

    def assert_successful(self) -> Self:
        assert_true(
            self.is_success,
            f"Response status code [{self.status_code}] is not a successful status code.",
        )
        return self

    def assert_ok(self) -> Self:
        return self.assert_status(HTTPStatus.OK)

    def assert_created(self) -> Self:
        return self.assert_status(HTTPStatus.CREATED)

    def assert_no_content(self) -> Self:
        self.assert_status(HTTPStatus.NO_CONTENT)
        assert_true(not self.read(), "Response content is not empty.")
        return self

    def assert_not_found(self) -> Self:
        return self.assert_status(HTTPStatus.NOT_FOUND)

    def assert_forbidden(self) -> Self:
        return self.assert_status(HTTPStatus.FORBIDDEN)

    def assert_unauthorized(self) -> Self:
        return self.assert_status(HTTPStatus.UNAUTHORIZED)

    def assert_redirect(self, uri: str | None = None) -> Self:
        assert_true(
            self.is_redirect,
            f"Response status code [{self.status_code}] is not a redirect status code.",
        )
        if uri is not None:
            assert_equals(uri, self.headers.get("Location"))
        return self
