import io
import json

import pytest

from minigit.errors import BadRequest, GitIOError, ProtocolError, RepositoryError
from minigit.http_request import (
    parse_headers,
    parse_json_create_body,
    parse_query,
    read_full_request,
    read_request_body,
    verify_request_validity,
)


def test_parse_headers_splits_on_colon_space():
    headers = parse_headers(["Host: localhost", "Content-Length: 12"])
    assert headers == {"Host": "localhost", "Content-Length": "12"}


def test_parse_headers_keeps_later_colons_in_value():
    headers = parse_headers(["X-Time: 10: 20"])
    assert headers["X-Time"] == "10: 20"


def test_parse_headers_empty():
    assert parse_headers([]) == {}


def test_parse_headers_invalid_line():
    with pytest.raises(BadRequest) as info:
        parse_headers(["Host: localhost", "garbage"])
    assert info.value.detail == "Invalid http request header: garbage"


def test_parse_query_without_question_mark():
    assert parse_query("pulls") == {}


def test_parse_query_pairs():
    assert parse_query("pulls?state=open&base=main") == {"state": "open", "base": "main"}


def test_parse_query_invalid_pair():
    with pytest.raises(BadRequest) as info:
        parse_query("pulls?state")
    assert info.value.detail == "Invalid query format: state"


def _parts(uri):
    return uri.split("/")


def test_verify_get_without_body_returns_empty():
    uri = "/repos/repo/pulls"
    assert verify_request_validity(None, "GET", uri, _parts(uri)) == ""


def test_verify_returns_body():
    uri = "/repos/repo/pulls"
    body = '{"base": "main"}'
    assert verify_request_validity(body, "POST", uri, _parts(uri)) == body


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH"])
def test_verify_body_required(method):
    uri = "/repos/repo/pulls/1"
    with pytest.raises(BadRequest) as info:
        verify_request_validity(None, method, uri, _parts(uri))
    assert info.value.detail == "POST, PUT and PATCH must include a body"


@pytest.mark.parametrize("uri", ["/other/repo/pulls", "/repos/repo/issues", "/repos/repo"])
def test_verify_invalid_uri(uri):
    with pytest.raises(BadRequest) as info:
        verify_request_validity(None, "GET", uri, _parts(uri))
    assert info.value.detail == "Invalid URI request"


def test_read_full_request_stops_at_empty_line():
    stream = io.BytesIO(b"GET /repos/r/pulls HTTP/1.1\r\nHost: localhost\r\n\r\nbody")
    lines = read_full_request(stream)
    assert lines == ["GET /repos/r/pulls HTTP/1.1", "Host: localhost"]
    assert stream.read() == b"body"


def test_read_full_request_until_eof():
    stream = io.BytesIO(b"GET /x HTTP/1.1\nHost: localhost")
    assert read_full_request(stream) == ["GET /x HTTP/1.1", "Host: localhost"]


def test_read_full_request_text_stream():
    stream = io.StringIO("GET /x HTTP/1.1\n\n")
    assert read_full_request(stream) == ["GET /x HTTP/1.1"]


def test_read_full_request_invalid_utf8():
    with pytest.raises(ProtocolError):
        read_full_request(io.BytesIO(b"\xff\xfe\n"))


def test_read_request_body_exact_length():
    stream = io.BytesIO(b'{"a": 1}rest')
    assert read_request_body(stream, 8) == '{"a": 1}'
    assert stream.read() == b"rest"


def test_read_request_body_short_stream():
    with pytest.raises(GitIOError):
        read_request_body(io.BytesIO(b"abc"), 10)


def test_read_request_body_invalid_utf8():
    with pytest.raises(BadRequest) as info:
        read_request_body(io.BytesIO(b"\xff\xff"), 2)
    assert info.value.detail == "Invalid HTTP request body"


def test_parse_json_create_body_with_title():
    body = json.dumps({"base": "main", "head": "feature", "title": "My PR"})
    assert parse_json_create_body(body) == ("main", "feature", "My PR")


def test_parse_json_create_body_without_title():
    body = json.dumps({"base": "main", "head": "feature"})
    assert parse_json_create_body(body) == ("main", "feature", None)


def test_parse_json_create_body_invalid_json():
    with pytest.raises(RepositoryError) as info:
        parse_json_create_body("{not json")
    assert info.value.detail == "Error deserializing http request body"


def test_parse_json_create_body_missing_base():
    with pytest.raises(RepositoryError) as info:
        parse_json_create_body(json.dumps({"head": "feature"}))
    assert info.value.detail == "Error reading branch_base from http request body"


def test_parse_json_create_body_missing_head():
    with pytest.raises(RepositoryError) as info:
        parse_json_create_body(json.dumps({"base": "main"}))
    assert info.value.detail == "Error reading branch_target from http request body"


def test_parse_json_create_body_non_string_base():
    with pytest.raises(RepositoryError):
        parse_json_create_body(json.dumps({"base": 3, "head": "feature"}))