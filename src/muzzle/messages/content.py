import json
from collections.abc import Callable, Mapping
from typing import Any, Self

import httpx

from muzzle.assertions import assert_equals, assert_subset, assert_true, format_value, is_subset

__all__ = ["ContentAssertions", "is_json_content_type"]


def is_json_content_type(content_type: str | None) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


class ContentAssertions:
    """
    Body assertions shared by requests and responses.

    Expects the host class to be an ``httpx.Request`` or ``httpx.Response``.
    """

    headers: httpx.Headers
    read: Callable[[], bytes]
    message_label: str = "message"

    def body_text(self) -> str:
        """Return the body decoded as text, reading the stream if needed."""
        return self.read().decode(self._body_charset(), errors="replace")

    def _body_charset(self) -> str:
        content_type = self.headers.get("Content-Type", "")
        for param in content_type.split(";")[1:]:
            key, _, value = param.strip().partition("=")
            if key.lower() == "charset" and value:
                return value.strip('"')
        return "utf-8"

    def decode(self) -> Any:
        """
        Decode the body.

        JSON bodies (by content type, or any body that parses as JSON when no
        content type is set) are returned as Python objects, anything else as text.
        """
        text = self.body_text()
        content_type = self.headers.get("Content-Type")

        if is_json_content_type(content_type):
            return json.loads(text) if text else None

        if content_type is None and text:
            try:
                return json.loads(text)
            except ValueError:
                return text

        return text

    def assert_header(self, header_name: str, value: str | list[str] | None = None) -> Self:
        """
        Assert the header is present and, optionally, carries the given value(s).

        Each expected value must equal one of the header's values, either as sent
        or after splitting comma-joined values.

        Args:
            header_name: Header name, case-insensitive.
            value: A value or list of values that must all be present on the header.
        """
        assert_true(
            header_name in self.headers,
            f"Header [{header_name}] not present on {self.message_label}.",
        )

        if value is not None:
            actual = self.headers.get_list(header_name)
            split = self.headers.get_list(header_name, split_commas=True)
            expected = [value] if isinstance(value, str) else list(value)
            missing = [item for item in expected if item not in actual and item not in split]
            assert_true(
                not missing,
                f"Header [{header_name}] was found, but value(s) [{', '.join(actual)}] "
                f"does not match [{', '.join(expected)}].",
            )

        return self

    def assert_header_missing(self, header_name: str) -> Self:
        assert_true(
            header_name not in self.headers,
            f"Unexpected header [{header_name}] is present on {self.message_label}.",
        )
        return self

    def _decoded_json(self) -> Any:
        try:
            return json.loads(self.body_text())
        except ValueError as e:
            raise AssertionError(f"Invalid JSON was returned: {e}") from e

    def assert_see(self, value: str) -> Self:
        assert_true(
            value in self.body_text(),
            f"Failed asserting that [{value}] is within the body:\n{self.body_text()[:500]}",
        )
        return self

    def assert_dont_see(self, value: str) -> Self:
        assert_true(
            value not in self.body_text(),
            f"Failed asserting that [{value}] is not within the body:\n{self.body_text()[:500]}",
        )
        return self

    def assert_json(self, data: Mapping[str, Any] | list[Any]) -> Self:
        """Assert the JSON body contains ``data``."""
        actual = self._decoded_json()
        assert_subset(
            data,
            actual,
            f"Unable to find JSON:\n{format_value(data)}\nwithin\n{format_value(actual)}",
        )
        return self

    def assert_exact_json(self, data: Any) -> Self:
        actual = self._decoded_json()
        assert_equals(
            data,
            actual,
            f"Failed asserting that JSON\n{format_value(actual)}\nequals\n{format_value(data)}",
        )
        return self

    def assert_json_missing(self, data: Mapping[str, Any]) -> Self:
        """Assert none of the given key/value pairs appear at the top level of the JSON body."""
        actual = self._decoded_json()
        for key, value in data.items():
            found = isinstance(actual, Mapping) and key in actual and is_subset(value, actual[key])
            assert_true(
                not found,
                f"Found unexpected JSON fragment\n{format_value({key: value})}\n"
                f"within\n{format_value(actual)}",
            )
        return self
