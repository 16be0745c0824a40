import json

import pytest

from simple_http_helper import UnsupportedEncodingError
from simple_http_helper.content import (
    DeleteContent,
    GetContent,
    LoginsightGetContent,
    PatchContent,
    PostContent,
)


def test_get_parameters_become_query_string() -> None:
    content = GetContent("http://api.local/items")
    content.attach_parameters({"q": "red shoes", "tag": ["a", "b"]})
    assert content.uri == "http://api.local/items?q=red+shoes&tag=a&tag=b"

    request = content.materialize_request()
    assert request.method == "GET"
    assert request.url.params.get_list("tag") == ["a", "b"]
    assert request.content == b""


def test_query_parameters_replace_previous_query() -> None:
    content = DeleteContent("http://api.local/items?stale=1")
    content.attach_parameters({"id": 3})
    content.attach_parameters({"id": 4})
    assert content.uri == "http://api.local/items?id=4"
    assert content.materialize_request().method == "DELETE"


def test_post_parameters_become_json_body() -> None:
    content = PostContent("http://api.local/items")
    content.attach_parameters({"x": 1, "name": "widget"})
    request = content.materialize_request()

    assert request.method == "POST"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {"x": 1, "name": "widget"}


def test_patch_keeps_url_parameters_next_to_body() -> None:
    content = PatchContent("http://api.local/items/9")
    content.attach_parameters({"done": True})
    content.attach_url_parameters({"dry_run": "yes"})
    request = content.materialize_request()

    assert request.method == "PATCH"
    assert request.url.params["dry_run"] == "yes"
    assert json.loads(request.content) == {"done": True}


def test_rich_body_rejects_other_encodings() -> None:
    content = PostContent("http://api.local/items")
    with pytest.raises(UnsupportedEncodingError, match="xml"):
        content.attach_parameters({"x": 1}, "xml")
    assert content.body is None


def test_rich_body_rejects_unserializable_params() -> None:
    content = PostContent("http://api.local/items")
    with pytest.raises(UnsupportedEncodingError):
        content.attach_parameters({"x": object()})


def test_headers_are_replaced_not_merged() -> None:
    content = GetContent("http://api.local/items")
    content.attach_headers({"X-First": "1"})
    content.attach_headers({"X-Second": "2"})
    assert content.headers == {"X-Second": "2"}

    request = content.materialize_request()
    assert "x-first" not in request.headers
    assert request.headers["x-second"] == "2"


def test_explicit_content_type_header_wins() -> None:
    content = PostContent("http://api.local/items")
    content.attach_headers({"Content-Type": "application/vnd.api+json"})
    content.attach_parameters({"x": 1})
    assert content.materialize_request().headers["content-type"] == "application/vnd.api+json"


def test_loginsight_segments_follow_key_and_value_order() -> None:
    content = LoginsightGetContent("http://li.local:9000/api/v1/events")
    content.attach_path_segment_parameters({"field": ["a", "b"], "region": "us"})
    assert content.uri == "http://li.local:9000/api/v1/events/field/a/field/b/region/us"


def test_loginsight_segments_accumulate_across_calls() -> None:
    content = LoginsightGetContent("http://li.local/api/v1/events")
    content.attach_path_segment_parameters({"source": "web01"})
    content.attach_path_segment_parameters({"text": ["CONTAINS disk"]})
    assert content.uri.endswith("/source/web01/text/CONTAINS%20disk")


def test_loginsight_segments_are_not_escaped_twice() -> None:
    content = LoginsightGetContent("http://li.local/api/v1/events")
    content.attach_path_segment_parameters({"text": "CONTAINS 100%"})
    content.attach_path_segment_parameters({"host": "a b"})
    assert content.uri.endswith("/text/CONTAINS%20100%25/host/a%20b")
    assert "%25" + "20" not in content.uri


def test_loginsight_segments_keep_existing_query() -> None:
    content = LoginsightGetContent("http://li.local/api/v1/events")
    content.attach_parameters({"limit": 5})
    content.attach_path_segment_parameters({"timestamp": "GT1700000000"})
    assert content.uri == "http://li.local/api/v1/events/timestamp/GT1700000000?limit=5"
    assert content.materialize_request().method == "GET"
