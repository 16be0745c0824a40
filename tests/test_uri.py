from urllib.parse import unquote, urlsplit

import pytest

from simple_http_helper import InvalidURIError
from simple_http_helper.uri import append_path, build_uri, escape_segment, replace_query


def test_build_uri_joins_base_path_and_args() -> None:
    uri = build_uri("http", "example.com", 8080, "api/v1", ["users", "42"])
    assert uri == "http://example.com:8080/api/v1/users/42"


def test_build_uri_without_args_has_no_trailing_slash() -> None:
    assert build_uri("https", "example.com", 8443, "api/v1", []) == "https://example.com:8443/api/v1"


def test_build_uri_omits_missing_port() -> None:
    assert build_uri("http", "example.com", None, "api", ["a"]) == "http://example.com/api/a"


def test_build_uri_trims_slashes_around_base_path() -> None:
    assert build_uri("http", "example.com", None, "/api/", ["a"]) == "http://example.com/api/a"
    assert build_uri("http", "example.com", None, "", ["a", "b"]) == "http://example.com/a/b"


def test_build_uri_escapes_spaces_and_non_ascii() -> None:
    uri = build_uri("http", "example.com", None, "files", ["my file", "café", 7])
    assert uri == "http://example.com/files/my%20file/caf%C3%A9/7"


@pytest.mark.parametrize(
    ("host", "port", "base_path", "args"),
    [
        ("example.com", 8080, "api/v1", ["users", "42"]),
        ("10.0.0.5", 9543, "api/v1/events", ["name with space"]),
        ("loginsight.local", None, "", ["ünïcode", "x"]),
        ("example.com", 8080, "api", ["what?now", "50%#off", "[v6]"]),
    ],
)
def test_build_uri_round_trips(host: str, port: int | None, base_path: str, args: list[str]) -> None:
    parsed = urlsplit(build_uri("http", host, port, base_path, args))
    assert parsed.hostname == host
    assert parsed.port == port
    segments = [unquote(part) for part in parsed.path.split("/") if part]
    expected = [part for part in base_path.split("/") if part] + args
    assert segments == expected


def test_build_uri_rejects_empty_host() -> None:
    with pytest.raises(InvalidURIError):
        build_uri("http", "", None, "api", [])


def test_build_uri_rejects_invalid_port() -> None:
    with pytest.raises(InvalidURIError):
        build_uri("http", "example.com", "abc", "api", [])  # type: ignore[arg-type]


def test_build_uri_rejects_unencodable_text() -> None:
    with pytest.raises(InvalidURIError):
        build_uri("http", "example.com", None, "api", ["\ud800"])


def test_escape_segment_encodes_slashes() -> None:
    assert escape_segment("a/b c") == "a%2Fb%20c"


def test_replace_query_keeps_path() -> None:
    assert replace_query("http://h/p%20q?old=1", "new=2") == "http://h/p%20q?new=2"
    assert replace_query("http://h/p?old=1", "") == "http://h/p"


def test_append_path_inserts_before_query() -> None:
    assert append_path("http://h/events?limit=5", ["k", "v"]) == "http://h/events/k/v?limit=5"
    assert append_path("http://h/", ["k", "v"]) == "http://h/k/v"


def test_build_uri_keeps_query_characters_inside_path() -> None:
    uri = build_uri("http", "example.com", None, "api", ["what?now"])
    assert uri == "http://example.com/api/what%3Fnow"
    assert replace_query(uri, "page=2") == "http://example.com/api/what%3Fnow?page=2"


def test_build_uri_brackets_ipv6_hosts() -> None:
    assert build_uri("https", "::1", 8443, "api", ["x"]) == "https://[::1]:8443/api/x"
    assert build_uri("https", "[::1]", None, "api", []) == "https://[::1]/api"
