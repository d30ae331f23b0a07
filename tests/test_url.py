import pytest

from resourceful._utils import (
    encode_query,
    join_url,
    normalize_base_url,
    normalize_path,
    split_method,
)


class TestSplitMethod:
    def test_uppercase_token_is_method(self) -> None:
        assert split_method("POST /users") == ("POST", "/users")

    def test_lowercase_token_is_path(self) -> None:
        assert split_method("post /users") == ("GET", "post /users")

    def test_no_space(self) -> None:
        assert split_method("/users/1") == ("GET", "/users/1")

    def test_method_only(self) -> None:
        assert split_method("DELETE") == ("DELETE", "")


@pytest.mark.parametrize(
    "path, expected",
    [
        ("", "/"),
        ("/", "/"),
        ("///", "/"),
        ("42", "/42"),
        ("/42/", "/42"),
        ("//a//b///", "/a/b"),
    ],
)
def test_normalize_path(path: str, expected: str) -> None:
    assert normalize_path(path) == expected


@pytest.mark.parametrize(
    "url, expected",
    [
        ("/", ""),
        ("/api/users/", "/api/users"),
        ("//api//users", "/api/users"),
        ("http://a.com//api///users//", "http://a.com/api/users"),
        ("https://a.com", "https://a.com"),
        ("git+ssh://host/x", "git+ssh://host/x"),
    ],
)
def test_normalize_base_url(url: str, expected: str) -> None:
    assert normalize_base_url(url) == expected


class TestEncodeQuery:
    def test_empty(self) -> None:
        assert encode_query({}) == ""

    def test_keeps_mapping_order(self) -> None:
        assert encode_query({"b": "2", "a": "1"}) == "?b=2&a=1"

    def test_encodes_keys_and_values(self) -> None:
        assert encode_query({"a key": "x&y", "k": "~*()'!"}) == "?a%20key=x%26y&k=~*()'!"

    def test_none_values_are_skipped(self) -> None:
        assert encode_query({"a": None, "b": "2"}) == "?b=2"
        assert encode_query({"a": None}) == ""

    def test_non_string_values(self) -> None:
        assert encode_query({"n": 3, "on": True, "off": False}) == "?n=3&on=true&off=false"


def test_join_url() -> None:
    assert join_url("http://a.com/api/", "/users?x=1") == "http://a.com/api/users?x=1"
    assert join_url("/", "/") == "/"
