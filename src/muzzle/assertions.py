"""Assertion primitives the fluent ``assert_*`` methods defer to.

Every helper raises :class:`AssertionError` so pytest reports a normal test
failure with the formatted message.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any

from rich.pretty import pretty_repr

__all__ = [
    "assert_equals",
    "assert_has_key",
    "assert_matches",
    "assert_not_has_key",
    "assert_subset",
    "assert_true",
    "format_value",
    "is_subset",
    "matches_wildcard",
]


def format_value(value: Any) -> str:
    """Render a value for a failure message, one item per line for containers."""
    return pretty_repr(value, max_width=60, indent_size=2)


def assert_true(condition: bool, message: str) -> None:
    if not condition:
        raise AssertionError(message)


def assert_equals(expected: Any, actual: Any, message: str | None = None) -> None:
    if expected != actual:
        raise AssertionError(
            message
            or f"Failed asserting that {format_value(actual)} "
            f"matches expected {format_value(expected)}."
        )


def is_subset(subset: Any, superset: Any) -> bool:
    """
    Check that ``subset`` is contained in ``superset``.

    Mappings are compared key by key (recursively), sequences item by item
    regardless of position, everything else by equality.
    """
    if isinstance(subset, Mapping):
        if not isinstance(superset, Mapping):
            return False
        return all(
            key in superset and is_subset(value, superset[key]) for key, value in subset.items()
        )

    if isinstance(subset, Sequence) and not isinstance(subset, str | bytes):
        if not isinstance(superset, Sequence) or isinstance(superset, str | bytes):
            return False
        remaining = list(superset)
        for item in subset:
            match = next((i for i, other in enumerate(remaining) if is_subset(item, other)), None)
            if match is None:
                return False
            remaining.pop(match)
        return True

    return subset == superset


def assert_subset(subset: Any, superset: Any, message: str | None = None) -> None:
    if not is_subset(subset, superset):
        raise AssertionError(
            message
            or f"Could not find\n{format_value(subset)}\nwithin\n{format_value(superset)}"
        )


def assert_has_key(key: str, mapping: Mapping[str, Any], message: str | None = None) -> None:
    if key not in mapping:
        raise AssertionError(
            message or f"Failed asserting that {format_value(dict(mapping))} has the key [{key}]."
        )


def assert_not_has_key(key: str, mapping: Mapping[str, Any], message: str | None = None) -> None:
    if key in mapping:
        raise AssertionError(
            message
            or f"Failed asserting that {format_value(dict(mapping))} does not have the key [{key}]."
        )


def assert_matches(pattern: str, value: str, message: str | None = None) -> None:
    if re.search(pattern, value) is None:
        raise AssertionError(message or f"Failed asserting that [{value}] matches [{pattern}].")


def matches_wildcard(pattern: str, value: str) -> bool:
    """Match ``value`` against ``pattern`` where ``*`` stands for any run of characters."""
    if pattern == value:
        return True
    regex = re.escape(pattern).replace(r"\*", ".*")
    return re.fullmatch(regex, value, flags=re.DOTALL) is not None
