import pytest

from muzzle.assertions import (
    assert_equals,
    assert_has_key,
    assert_matches,
    assert_not_has_key,
    assert_subset,
    format_value,
    is_subset,
    matches_wildcard,
)


def test_assert_equals_reports_both_values():
    with pytest.raises(AssertionError, match="matches expected"):
        assert_equals("GET", "POST")


def test_assert_equals_uses_custom_message():
    with pytest.raises(AssertionError, match="^custom$"):
        assert_equals(1, 2, "custom")


@pytest.mark.parametrize(
    ("subset", "superset"),
    [
        ({"a": 1}, {"a": 1, "b": 2}),
        ({"a": {"b": [1]}}, {"a": {"b": [2, 1], "c": 3}}),
        (["b"], ["a", "b"]),
        ([{"id": 2}], [{"id": 1, "x": 0}, {"id": 2, "x": 1}]),
        ("x", "x"),
    ],
)
def test_is_subset_accepts(subset, superset):
    assert is_subset(subset, superset)


@pytest.mark.parametrize(
    ("subset", "superset"),
    [
        ({"a": 2}, {"a": 1}),
        ({"missing": 1}, {"a": 1}),
        (["a", "a"], ["a"]),
        ({"a": 1}, ["a"]),
        (["a"], "a"),
    ],
)
def test_is_subset_rejects(subset, superset):
    assert not is_subset(subset, superset)


def test_assert_subset_message_shows_both_sides():
    with pytest.raises(AssertionError) as exc_info:
        assert_subset({"foo": "bar"}, {"foo": "baz"})

    message = str(exc_info.value)
    assert "Could not find" in message
    assert "'bar'" in message
    assert "'baz'" in message


def test_key_assertions():
    assert_has_key("page", {"page": "1"})
    assert_not_has_key("sort", {"page": "1"})

    with pytest.raises(AssertionError, match=r"has the key \[sort\]"):
        assert_has_key("sort", {"page": "1"})
    with pytest.raises(AssertionError, match=r"does not have the key \[page\]"):
        assert_not_has_key("page", {"page": "1"})


def test_assert_matches():
    assert_matches(r"^/users/\d+$", "/users/42")
    with pytest.raises(AssertionError):
        assert_matches(r"^/users/\d+$", "/users/me")


@pytest.mark.parametrize(
    ("pattern", "value", "expected"),
    [
        ("/users", "/users", True),
        ("/users/*", "/users/42", True),
        ("*/edit", "/users/42/edit", True),
        ("/users/*", "/groups/42", False),
        ("/users.json", "/usersXjson", False),
        ("/users", "/users/42", False),
    ],
)
def test_matches_wildcard(pattern, value, expected):
    assert matches_wildcard(pattern, value) is expected


def test_format_value_is_readable():
    rendered = format_value({"foo": "bar"})
    assert "'foo'" in rendered
    assert "'bar'" in rendered
