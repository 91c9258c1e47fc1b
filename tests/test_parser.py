import pytest

from apiapi_transporter import HTTPStatusError, MalformedResponseError
from apiapi_transporter.parser import (
    UNKNOWN_STATUS,
    locate_body,
    parse_header_block,
    parse_response,
    status_message,
)

URL = "http://api.test/items"


def test_parse_combined_raw_response() -> None:
    header_block = b"HTTP/1.1 200 OK\r\nX-Test: value\r\n\r\n"
    result = parse_response(URL, header_block, header_block + b"payload", combined=True)
    assert result.status.code == 200
    assert result.status.message == "OK"
    assert result.headers["X-Test"] == "value"
    assert result.body == b"payload"


def test_locate_body_requires_header_block() -> None:
    with pytest.raises(MalformedResponseError) as excinfo:
        locate_body(URL, b"HTTP/1.1 200 OK\r\n\r\n", b"something else")
    assert "header/body separator" in str(excinfo.value)
    assert URL in str(excinfo.value)


@pytest.mark.parametrize(
    ("code", "ok"),
    [(199, False), (200, True), (299, True), (300, False)],
)
def test_only_2xx_status_codes_succeed(code: int, ok: bool) -> None:
    header_block = f"HTTP/1.1 {code} Whatever\r\n\r\n".encode()
    if ok:
        assert parse_response(URL, header_block, b"").status.code == code
    else:
        with pytest.raises(HTTPStatusError) as excinfo:
            parse_response(URL, header_block, b"")
        assert excinfo.value.status_code == code


def test_status_error_carries_reason_phrase() -> None:
    with pytest.raises(HTTPStatusError) as excinfo:
        parse_response(URL, b"HTTP/1.0 404 Nope\r\n\r\n", b"")
    assert excinfo.value.reason == "Not Found"
    assert str(excinfo.value) == f"The request to {URL} returned status code 404: Not Found"


@pytest.mark.parametrize(
    "block",
    [b"NOT HTTP\r\n\r\n", b"HTTP/2 200\r\n\r\n", b"HTTP/1.1 2000 X\r\n\r\n", b""],
)
def test_malformed_status_line(block: bytes) -> None:
    with pytest.raises(MalformedResponseError) as excinfo:
        parse_response(URL, block, b"")
    assert "protocol and status code" in str(excinfo.value)


def test_header_values_are_normalized() -> None:
    block = (
        b"HTTP/1.1 201 Created\r\n"
        b"Location:   http://api.test/items/1  \r\n"
        b"X-Folded: first\r\n\tsecond\r\n"
        b"X-Spaces: a    b\r\n"
        b"X-Dup: one\r\n"
        b"X-Dup: two\r\n"
        b"\r\n"
    )
    code, headers = parse_header_block(URL, block)
    assert code == 201
    assert headers["Location"] == "http://api.test/items/1"
    assert headers["X-Folded"] == "first second"
    assert headers["X-Spaces"] == "a b"
    assert headers["X-Dup"] == "two"


def test_lines_without_colon_are_skipped() -> None:
    _, headers = parse_header_block(URL, b"HTTP/1.1 200 OK\r\ngarbage\r\nX-A: 1\r\n\r\n")
    assert headers == {"X-A": "1"}


def test_status_message_fallback() -> None:
    assert status_message(429) == "Too Many Requests"
    assert status_message(503) == "Service Unavailable"
    assert status_message(299) == UNKNOWN_STATUS


def test_result_helpers() -> None:
    result = parse_response(URL, b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\n", b"hi")
    assert result.get_header("content-type") == "text/plain"
    assert result.get_header("missing") is None
    assert result.as_dict() == {
        "headers": {"Content-Type": "text/plain"},
        "body": b"hi",
        "response": {"code": 200, "message": "OK"},
    }
